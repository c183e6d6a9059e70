"""
## Goal : understand how a unique neuron learns (=perceptron), before the Keras MLP
## Only vectorized computations : forward -> cost -> back-propagation -> gradient descent

Perceptron :
x_1 -> w_1 |
            | z -> a = sigmoid(z)
x_2 -> w_2 |
  1 -> w_0 |

W : (neurones, n+1)
X : (m, n+1) ; first column is the bias input (=1)
"""

import numpy as np
from tqdm import tqdm


def generate_OR_data(nb_samples, seed=None):
    """Noisy samples of the OR gate : (X (m, 2), y (m, 1))"""
    if nb_samples % 4 != 0:
        raise ValueError(f"nb_samples must be a multiple of 4, got {nb_samples}")

    rng = np.random.RandomState(seed)
    corners = np.array([[1, 1], [1, 0], [0, 1], [0, 0]], dtype=float)
    labels = np.array([1, 1, 1, 0])

    X = np.tile(corners, (nb_samples // 4, 1)) + 0.1 * rng.randn(nb_samples, 2) #(m, 2)
    y = np.tile(labels, nb_samples // 4).reshape((nb_samples, 1)) #(m, 1)

    order = rng.permutation(nb_samples)
    return X[order], y[order]


def add_bias_column(X):
    one_col = np.ones(shape=(X.shape[0], 1)) #(m, 1)
    return np.hstack((one_col, X)) #(m, n+1)


def sigmoid(z):
    return 1/(1 + np.exp(-z))


def create_layer(nb_neu, nb_input, seed=None):
    rng = np.random.RandomState(seed)
    return rng.randn(nb_neu, nb_input + 1) #(neurones, n+1)


def forward(X_sample, W):
    if W.shape[1] != X_sample.shape[1]:
        raise ValueError(f"forward : W {W.shape} does not match X {X_sample.shape}")

    z = np.dot(X_sample, W.T) #(m, n+1)*(neurones, n+1).T = (m, neurones)
    return sigmoid(z) #(m, neurones)


def compute_loss(A, y):
    """
    Binary cross-entropy.
    log(0) -> impossible, so an epsilon is added to be sure A never contains a 0
    """
    if A.shape != y.shape:
        raise ValueError(f"loss : A {A.shape} != y {y.shape}")
    epsilon = 1e-15
    j = y*np.log(A+epsilon) + (1-y)*np.log(1-A+epsilon) #(m, 1)
    return (-1/A.shape[0]) * np.sum(j) #scalar


def back_propa(prediction, X_sample, y_sample, actual_W, learning_rate=0.5):
    if X_sample.shape[0] != y_sample.shape[0]:
        raise ValueError(f"back_propa : {X_sample.shape[0]} samples but {y_sample.shape[0]} labels")

    J = compute_loss(A=prediction, y=y_sample)

    #delta computation
    E = prediction - y_sample #(m, 1)
    delta = (1/X_sample.shape[0]) * np.dot(E.T, X_sample) #(m,1).T*(m, n+1) = (1, n+1)

    #batch gradient descent
    new_W = actual_W - learning_rate*delta
    return (new_W, J, E)


def train_perceptron(X, y, epochs=100, learning_rate=0.5, seed=None, progress=False):
    """
    X : (m, n) without bias column, y : (m, 1)
    returns final W (1, n+1) and the cost of each epoch
    """
    Xb = add_bias_column(X)
    w = create_layer(nb_neu=1, nb_input=X.shape[1], seed=seed)

    J = []
    for _ in tqdm(range(epochs), disable=not progress):
        a = forward(X_sample=Xb, W=w) #(m, neurones)
        (w, J_temp, _) = back_propa(prediction=a, X_sample=Xb, y_sample=y,
                                    actual_W=w, learning_rate=learning_rate)
        J.append(float(J_temp))
    return w, J


def predict(X, W):
    a = forward(add_bias_column(X), W)
    return (a >= 0.5).astype(int)
