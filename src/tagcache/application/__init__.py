"""Application layer – the cache facade and its collaborators."""
