class AssetLoadError(Exception):
    """One or more images failed to load."""

    def __init__(self, paths):
        self.paths = list(paths)
        super().__init__("failed to load: " + ", ".join(str(p) for p in self.paths))
