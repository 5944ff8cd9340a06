"""Noise layers. Each module registers one layer with @noise_layer."""
