"""Tests for iris_classification.mlp_model."""

import pytest
from tensorflow.keras.layers import BatchNormalization, Dense, Dropout

from iris_classification.config import LayerConfig, NetworkConfig
from iris_classification.mlp_model import create_model


@pytest.fixture(scope="module")
def model():
    return create_model(NetworkConfig())


class TestCreateModel:

    def test_dense_widths(self, model) -> None:
        widths = [layer.units for layer in model.layers if isinstance(layer, Dense)]
        assert widths == [10, 7, 5, 3]

    def test_layer_order(self, model) -> None:
        kinds = [type(layer).__name__ for layer in model.layers]
        assert kinds == [
            "Dense", "BatchNormalization", "Dropout",
            "Dense", "BatchNormalization", "Dropout",
            "Dense",
            "Dense",
        ]

    def test_dropout_rate(self, model) -> None:
        rates = [layer.rate for layer in model.layers if isinstance(layer, Dropout)]
        assert rates == [0.3, 0.3]

    def test_regularised_hidden_layers(self, model) -> None:
        dense = [layer for layer in model.layers if isinstance(layer, Dense)]
        assert all(layer.kernel_regularizer is not None for layer in dense[:3])
        assert dense[-1].kernel_regularizer is None

    def test_softmax_output(self, model) -> None:
        assert tuple(model.output_shape) == (None, 3)
        assert model.layers[-1].get_config()["activation"] == "softmax"

    def test_input_shape(self, model) -> None:
        assert tuple(model.input_shape) == (None, 4)

    def test_output_width_mismatch(self) -> None:
        config = NetworkConfig(layers=[LayerConfig(4, "relu"), LayerConfig(2, "softmax")])
        with pytest.raises(ValueError, match="one per class"):
            create_model(config)

    def test_empty_layers(self) -> None:
        with pytest.raises(ValueError):
            create_model(NetworkConfig(layers=[]))

    def test_plain_layers_have_no_extras(self) -> None:
        config = NetworkConfig(layers=[LayerConfig(8, "relu"), LayerConfig(3, "softmax")])
        built = create_model(config)
        assert not any(isinstance(layer, (BatchNormalization, Dropout)) for layer in built.layers)
