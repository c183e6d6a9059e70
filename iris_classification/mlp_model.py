"""
## Goal : multi-layer perceptron for the iris species
## 4 features -> Dense(10) -> Dense(7) -> Dense(5) -> Dense(3, softmax)
"""

from tensorflow.keras import Input, regularizers
from tensorflow.keras.layers import Dense, Dropout, BatchNormalization
from tensorflow.keras.models import Sequential

from .config import NetworkConfig, MODEL_NAME


def create_layer(layer_cfg):
    kernel_regularizer = None
    if layer_cfg.l1 or layer_cfg.l2:
        kernel_regularizer = regularizers.l1_l2(l1=layer_cfg.l1, l2=layer_cfg.l2)
    return Dense(layer_cfg.units,
                 activation=layer_cfg.activation,
                 kernel_regularizer=kernel_regularizer)


def create_model(config=None):
    #-------MODEL------
    if config is None:
        config = NetworkConfig()

    if not config.layers:
        raise ValueError("network needs at least one layer")

    #ATTENTION !! last layer must contain the same nb of neurons as the nb of labels
    if config.layers[-1].units != config.nb_classes:
        raise ValueError(
            f"output layer has {config.layers[-1].units} units, expected {config.nb_classes} (one per class)"
        )

    model = Sequential(name=MODEL_NAME)
    model.add(Input(shape=(config.nb_features,)))

    for layer_cfg in config.layers:
        model.add(create_layer(layer_cfg))
        if layer_cfg.batch_norm:
            model.add(BatchNormalization())
        if layer_cfg.dropout:
            #drop 30% of the units at each step, only while training
            model.add(Dropout(layer_cfg.dropout))

    return model
