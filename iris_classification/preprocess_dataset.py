"""
## Goal : prepare the iris dataset for the MLP
## load csv -> one-hot labels -> train/test split (75/25) -> standardisation

Dataset : https://archive.ics.uci.edu/ml/datasets/iris
150 samples, 4 features (cm), 3 species
"""

import os

import numpy as np
import pandas as pd

from tensorflow.keras.utils import to_categorical

from sklearn.model_selection import train_test_split
from sklearn.preprocessing import StandardScaler

from .config import NetworkConfig, DATA_PATH


class IrisDataset():
    """Train and test sets ready for Keras (float32 features, one-hot labels)."""

    def __init__(self, x_train, x_test, y_train, y_test, scaler, class_names,
                 train_index=None, test_index=None):
        self.x_train = x_train
        self.x_test = x_test
        self.y_train = y_train
        self.y_test = y_test
        self.scaler = scaler
        self.class_names = tuple(class_names)
        self.train_index = train_index
        self.test_index = test_index

    def show_info(self):
        print("x_train : ", self.x_train.shape) #(112, 4)
        print("y_train : ", self.y_train.shape) #(112, 3)
        print("x_test : ", self.x_test.shape) #(38, 4)
        print("y_test : ", self.y_test.shape) #(38, 3)


def load_iris_table(path=DATA_PATH, config=None):
    if config is None:
        config = NetworkConfig()

    if not os.path.isfile(path):
        raise FileNotFoundError(f"iris dataset not found : {path}")

    table = pd.read_csv(path)

    expected = list(config.feature_columns) + [config.label_column]
    if len(table.columns) != len(expected) or set(table.columns) != set(expected):
        raise ValueError(
            f"expected columns {expected}, got {list(table.columns)}"
        )

    #malformed rows : empty cells or text in a measurement column
    for column in expected:
        if table[column].isna().any():
            rows = list(table.index[table[column].isna()])
            raise ValueError(f"missing values in column '{column}' (rows {rows})")
    for column in config.feature_columns:
        if not pd.api.types.is_numeric_dtype(table[column]):
            raise ValueError(f"column '{column}' is not numeric")

    nb_labels = table[config.label_column].nunique()
    if nb_labels != config.nb_classes:
        raise ValueError(
            f"expected {config.nb_classes} distinct labels in '{config.label_column}', got {nb_labels}"
        )

    return table[expected]


def encode_labels(labels, class_names):
    """
    OneHotEncoder on labels, with a fixed enumeration :
    class_names[i] -> vector with a 1 at index i
    """
    index_of = {name: i for i, name in enumerate(class_names)}
    ids = []
    for label in labels:
        if label not in index_of:
            raise ValueError(f"unknown label : {label!r} (known : {list(class_names)})")
        ids.append(index_of[label])
    return to_categorical(np.array(ids, dtype=int), num_classes=len(class_names))


def decode_labels(one_hot, class_names):
    #argmax keeps the first max => lowest index wins on ties
    ids = np.argmax(np.asarray(one_hot), axis=1)
    return [class_names[i] for i in ids]


def split_dataset(X, y, test_size=0.25, random_state=42):
    return train_test_split(X, y, test_size=test_size, random_state=random_state)


def scale_features(x_train, x_test):
    """Standardisation : mean/variance computed on the train set only, then applied to both sets."""
    scaler = StandardScaler()
    x_train_s = scaler.fit_transform(x_train)
    x_test_s = scaler.transform(x_test)
    return x_train_s.astype("float32"), x_test_s.astype("float32"), scaler


def preprocessing_data_iris(path=DATA_PATH, config=None):
    if config is None:
        config = NetworkConfig()

    table = load_iris_table(path, config)

    X = table[list(config.feature_columns)]
    y = encode_labels(table[config.label_column], config.class_names)

    x_train, x_test, y_train, y_test = split_dataset(
        X, y, test_size=config.test_size, random_state=config.random_state)

    x_train_s, x_test_s, scaler = scale_features(x_train.to_numpy(), x_test.to_numpy())

    #convert in array (mandatory with tensorflow)
    return IrisDataset(
        x_train=x_train_s,
        x_test=x_test_s,
        y_train=np.array(y_train),
        y_test=np.array(y_test),
        scaler=scaler,
        class_names=config.class_names,
        train_index=np.array(x_train.index),
        test_index=np.array(x_test.index),
    )
