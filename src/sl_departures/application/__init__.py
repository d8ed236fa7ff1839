"""Application layer - departure acquisition and scheduling logic."""
