"""Hyperparameter configuration for LexVec word-embedding training."""
