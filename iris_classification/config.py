"""
## Goal : hyper-parameters of the iris MLP, kept in one place
## The default values are the ones used in the lesson.
"""

import os
from dataclasses import dataclass, field


PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_PATH = os.path.join(PACKAGE_DIR, "data", "iris.csv")
LOG_PATH = "LOG_training.txt"
MODEL_NAME = "iris_mlp"

FEATURE_COLUMNS = ("sepal_length", "sepal_width", "petal_length", "petal_width")
LABEL_COLUMN = "species"
CLASS_NAMES = ("setosa", "versicolor", "virginica")

BATCH_SIZE = 7
EPOCHS = 5
DROPOUT_RATE = 0.3
L1_PENALTY = 0.001
L2_PENALTY = 0.001
TEST_SIZE = 0.25
RANDOM_STATE = 42


@dataclass(frozen=True)
class LayerConfig:
    """One fully-connected layer, and what comes right after it."""

    units: int
    activation: str = "relu"
    l1: float = 0.0
    l2: float = 0.0
    batch_norm: bool = False
    dropout: float = 0.0


def default_layers():
    #10 -> 7 -> 5 -> 3 ; BatchNorm + Dropout only behind the 2 first hidden layers
    return [
        LayerConfig(10, "relu", l1=L1_PENALTY, l2=L2_PENALTY, batch_norm=True, dropout=DROPOUT_RATE),
        LayerConfig(7, "relu", l1=L1_PENALTY, l2=L2_PENALTY, batch_norm=True, dropout=DROPOUT_RATE),
        LayerConfig(5, "relu", l1=L1_PENALTY, l2=L2_PENALTY),
        #ATTENTION !! last layer must have as many neurons as labels
        LayerConfig(len(CLASS_NAMES), "softmax"),
    ]


@dataclass
class NetworkConfig:
    """
    Topology and training settings of the network.

    layers are consumed in order by the Keras Sequential builder,
    the last one is the softmax output.
    """

    layers: list = field(default_factory=default_layers)
    batch_size: int = BATCH_SIZE
    epochs: int = EPOCHS
    optimizer: str = "adam"
    loss: str = "categorical_crossentropy"
    test_size: float = TEST_SIZE
    random_state: int = RANDOM_STATE
    feature_columns: tuple = FEATURE_COLUMNS
    label_column: str = LABEL_COLUMN
    class_names: tuple = CLASS_NAMES

    @property
    def nb_features(self) -> int:
        return len(self.feature_columns)

    @property
    def nb_classes(self) -> int:
        return len(self.class_names)
