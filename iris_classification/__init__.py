"""
Iris classification with a small multi-layer perceptron (Keras),
plus the from-scratch perceptron used to introduce the lesson.
"""

__version__ = "1.0.0"
