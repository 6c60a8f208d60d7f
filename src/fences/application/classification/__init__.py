"""Layer classification of module graph files."""

from fences.application.classification.classifier import LayerClassifier

__all__ = ["LayerClassifier"]
