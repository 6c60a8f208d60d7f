"""Application layer: classification, validation, aggregation and reporting."""
