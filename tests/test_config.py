"""Tests for HeatmapConfig construction, builders and validation."""

import dataclasses

import pytest

from vector_heatmap import BLUE_RED, ConfigurationError, HeatmapConfig, Point, create


def _identity(point):
    return point


class TestCreate:
    """Tests for create() defaults."""

    def test_defaults(self):
        config = create(_identity, BLUE_RED)
        assert config.max_weight == 1
        assert config.radius == 25
        assert config.blur == 15
        assert config.id_suffix is None

    def test_gradient_stored_as_tuple(self):
        config = create(_identity, [(0, "#000000"), (1, "#ffffff")])
        assert config.gradient == ((0.0, "#000000"), (1.0, "#ffffff"))

    def test_map_record_kept(self):
        config = create(lambda r: Point(r[0], r[1]), BLUE_RED)
        assert config.map_record((3, 4)) == Point(3, 4)


class TestBuilders:
    """Tests for the with_* builder methods."""

    def test_builders_return_new_values(self):
        base = create(_identity, BLUE_RED)
        updated = (
            base.with_max_weight(10)
            .with_radius(40)
            .with_blur(5)
            .with_id_suffix("a")
        )

        assert (updated.max_weight, updated.radius, updated.blur) == (10, 40, 5)
        assert updated.id_suffix == "a"
        # Base value untouched
        assert (base.max_weight, base.radius, base.blur) == (1, 25, 15)
        assert base.id_suffix is None

    def test_builder_order_does_not_matter(self):
        base = create(_identity, BLUE_RED)
        a = base.with_radius(10).with_blur(2)
        b = base.with_blur(2).with_radius(10)
        assert a == b

    def test_fields_cannot_be_assigned(self):
        config = create(_identity, BLUE_RED)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.radius = 5

    def test_zero_blur_allowed(self):
        assert create(_identity, BLUE_RED).with_blur(0).blur == 0


class TestValidation:
    """Tests for construction-time validation."""

    @pytest.mark.parametrize("radius", [0, -1])
    def test_non_positive_radius(self, radius):
        with pytest.raises(ConfigurationError, match="radius"):
            create(_identity, BLUE_RED).with_radius(radius)

    @pytest.mark.parametrize("max_weight", [0, -0.5])
    def test_non_positive_max_weight(self, max_weight):
        with pytest.raises(ConfigurationError, match="max_weight"):
            create(_identity, BLUE_RED).with_max_weight(max_weight)

    def test_negative_blur(self):
        with pytest.raises(ConfigurationError, match="blur"):
            create(_identity, BLUE_RED).with_blur(-1)

    def test_direct_construction_validates(self):
        with pytest.raises(ConfigurationError):
            HeatmapConfig(map_record=_identity, gradient=BLUE_RED, radius=0)

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)

    def test_unordered_gradient_not_rejected(self):
        config = create(_identity, [(1.0, "#ff0000"), (0.0, "#0000ff")])
        assert len(config.gradient) == 2
