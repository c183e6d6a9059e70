"""Shared fixtures : a 150-row iris csv written from scikit-learn's copy."""

import matplotlib
matplotlib.use("Agg")

import pandas as pd
import pytest
from sklearn.datasets import load_iris

from iris_classification.config import FEATURE_COLUMNS, LABEL_COLUMN


@pytest.fixture(scope="session")
def iris_csv(tmp_path_factory):
    bunch = load_iris()
    table = pd.DataFrame(bunch.data, columns=list(FEATURE_COLUMNS))
    table[LABEL_COLUMN] = [bunch.target_names[t] for t in bunch.target]
    path = tmp_path_factory.mktemp("data") / "iris.csv"
    table.to_csv(path, index=False)
    return str(path)


@pytest.fixture
def log_path(tmp_path):
    return str(tmp_path / "LOG_training.txt")
