class ConfigWrapper(object):
    def __init__(self, config):
        self.config = config

    def __getattr__(self, name):
        return getattr(self.config, name, {})

    @property
    def img_size(self):
        return tuple(self.config.input_size)

    @property
    def feature_map_sizes(self):
        return [tuple(x) for x in getattr(self.config, 'feature_map_sizes', [])]
