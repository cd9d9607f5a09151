class DeckgenError(Exception):
    pass


class SinkWriteError(DeckgenError):
    pass


class LifecycleError(DeckgenError):
    pass


class SettingsError(DeckgenError):
    pass
