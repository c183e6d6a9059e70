"""
## Goal : train the iris MLP and look at its errors
## prepare data -> create model -> train -> evaluate (+ confusion matrix)

run : iris-mlp --epochs 5 --batch-size 7
"""

import argparse
import sys
import time

import numpy as np
import tensorflow as tf

from tensorflow.keras.callbacks import Callback
from tensorflow.keras.utils import to_categorical

from sklearn.metrics import multilabel_confusion_matrix

from .config import NetworkConfig, DATA_PATH, LOG_PATH
from .preprocess_dataset import preprocessing_data_iris
from .mlp_model import create_model
from .plots import plot_history
from .utils import print_info, print_error, print_ram_used, append_log


class PipelineStageError(RuntimeError):
    """A stage of the run failed ; the original exception is chained as __cause__."""

    def __init__(self, stage, cause):
        self.stage = stage
        self.cause = cause
        super().__init__(f"stage '{stage}' failed : {type(cause).__name__}: {cause}")


class EvaluationResult():

    def __init__(self, loss, accuracy, confusion, predictions):
        self.loss = loss
        self.accuracy = accuracy
        self.confusion = confusion
        self.predictions = predictions


class EpochLogger(Callback):
    """Print one line per epoch and write it in the training log file."""

    def __init__(self, log_path=None):
        super().__init__()
        self.log_path = log_path
        self.start = None

    def on_epoch_begin(self, epoch, logs=None):
        self.start = time.time()

    def on_epoch_end(self, epoch, logs=None):
        logs = logs or {}
        loss, acc = logs.get("loss", float("nan")), logs.get("accuracy", float("nan"))
        line = f"[Epoch]: {epoch+1} - [LOSS] : {loss:.4f} [Accuracy] : {acc:.4f} - {time.time() - self.start:.2f}s"
        print_info(line)
        append_log(self.log_path, line)


def set_seed(seed):
    #python, numpy and tensorflow seeds + deterministic kernels => same run twice gives same weights
    tf.keras.utils.set_random_seed(seed)
    tf.config.experimental.enable_op_determinism()


def train_model(model, x_train, y_train, config=None, log_path=None):
    #------TRAINING------
    if config is None:
        config = NetworkConfig()

    #one-hot labels => CategoricalCrossentropy (integer labels would need the sparse one)
    model.compile(
        optimizer=config.optimizer,
        loss=config.loss,
        metrics=['accuracy']
        )

    layers = [l.units for l in config.layers]
    config_line = (f"CONFIG : layers : {layers} | BATCH_SIZE : {config.batch_size} | "
                   f"EPOCHS : {config.epochs} | SEED : {config.random_state}")
    append_log(log_path, config_line)

    #no early stopping : always the fixed nb of epochs
    history = model.fit(x_train, y_train,
        batch_size=config.batch_size,
        epochs=config.epochs,
        verbose=0,
        callbacks=[EpochLogger(log_path)],
        )
    return history


def predict_hard_labels(model, x, nb_classes=None):
    predict = model.predict(x, verbose=0) #(m, nb_classes) probabilities
    if nb_classes is None:
        nb_classes = predict.shape[1]
    label_pred = np.argmax(predict, axis=1) #ties => lowest index
    return to_categorical(label_pred, num_classes=nb_classes)


def compute_confusion_matrix(y_true, y_pred):
    """
    One 2x2 table per class : [[TN, FP], [FN, TP]]
    y_true, y_pred : one-hot arrays (m, nb_classes) -> (nb_classes, 2, 2)
    """
    y_true = np.asarray(y_true).astype(int)
    y_pred = np.asarray(y_pred).astype(int)
    if y_true.shape != y_pred.shape:
        raise ValueError(f"shape mismatch : y_true {y_true.shape} / y_pred {y_pred.shape}")
    return multilabel_confusion_matrix(y_true, y_pred)


def evaluate_model(model, x_test, y_test):
    val_loss, val_accuracy = model.evaluate(x_test, y_test, verbose=0)
    y_pred = predict_hard_labels(model, x_test, nb_classes=y_test.shape[1])
    confusion = compute_confusion_matrix(y_test, y_pred)
    return EvaluationResult(float(val_loss), float(val_accuracy), confusion, y_pred)


def run_pipeline(data_path=DATA_PATH, config=None, log_path=LOG_PATH):
    """
    Whole lesson example, executed once :
    returns (model, history, EvaluationResult), or raises PipelineStageError
    """
    if config is None:
        config = NetworkConfig()

    try:
        set_seed(config.random_state)
    except Exception as e:
        raise PipelineStageError("setup", e) from e

    try:
        dataset = preprocessing_data_iris(data_path, config)
    except Exception as e:
        raise PipelineStageError("data", e) from e
    dataset.show_info()

    try:
        model = create_model(config)
    except Exception as e:
        raise PipelineStageError("model", e) from e

    try:
        history = train_model(model, dataset.x_train, dataset.y_train, config, log_path)
    except Exception as e:
        raise PipelineStageError("train", e) from e

    try:
        result = evaluate_model(model, dataset.x_test, dataset.y_test)
    except Exception as e:
        raise PipelineStageError("evaluate", e) from e

    return model, history, result


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return number


def parse_args(argv=None):
    defaults = NetworkConfig()
    parser = argparse.ArgumentParser(description="Train a small MLP on the iris dataset")
    parser.add_argument("--data", default=DATA_PATH, help="csv with 4 features + species")
    parser.add_argument("--epochs", type=positive_int, default=defaults.epochs)
    parser.add_argument("--batch-size", type=positive_int, default=defaults.batch_size)
    parser.add_argument("--seed", type=int, default=defaults.random_state)
    parser.add_argument("--log", default=LOG_PATH, help="training log file")
    parser.add_argument("--plot", default=None, help="save loss/accuracy curves to this image")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = NetworkConfig(epochs=args.epochs, batch_size=args.batch_size, random_state=args.seed)

    start_train = time.time()
    print("start training...")
    try:
        model, history, result = run_pipeline(args.data, config, args.log)
    except PipelineStageError as e:
        print_error(str(e))
        return 1

    print(f"TOTAL TRAINING TIME : {time.time() - start_train:.2f}s")
    print_ram_used()
    print("Cout de : ", result.loss)
    print("Precision de : ", result.accuracy)
    print("Confusion matrix [[TN, FP], [FN, TP]] per class", list(config.class_names), ":")
    print(result.confusion.tolist())

    if args.plot:
        plot_history(history, path=args.plot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
