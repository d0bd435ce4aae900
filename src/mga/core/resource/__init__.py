"""Resource management runners (``resource create`` / ``resource list``)."""
