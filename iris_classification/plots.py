import matplotlib.pyplot as plt
from numpy import linspace


def _save_or_show(path):
    if path is None:
        plt.show()
    else:
        plt.savefig(path)
        plt.close()


def plot_cost(J, path=None):
    ep = linspace(start=1, stop=len(J), num=len(J))
    plt.figure("COST")
    plt.plot( ep , J, label="J")
    plt.legend()
    _save_or_show(path)


def plot_history(history, path=None):
    """Loss and accuracy of each epoch, from the History returned by model.fit"""
    loss = history.history["loss"]
    acc = history.history["accuracy"]
    ep = linspace(start=1, stop=len(loss), num=len(loss))

    plt.figure("TRAINING")
    plt.subplot(1, 2, 1)
    plt.title("loss")
    plt.plot(ep, loss, c="red", label="loss")
    plt.legend()
    plt.subplot(1, 2, 2)
    plt.title("accuracy")
    plt.plot(ep, acc, c="blue", label="accuracy")
    plt.legend()
    _save_or_show(path)
