from padded_cell.engine.analyze import analyze  # noqa: F401
