"""
Input-validation errors raised by the pitch-class engine.

None of these are transient: the caller passed a value the catalogs do not
know, and the same call will fail the same way every time.
"""


class FretnoterError(ValueError):
    """Base class for every error the engine raises."""


class UnknownNote(FretnoterError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"note '{symbol}' doesn't exist")


class UnknownScale(FretnoterError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"scale '{name}' doesn't exist")


class UnknownChord(FretnoterError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"chord '{name}' doesn't exist")


class EmptyInput(FretnoterError):
    def __init__(self):
        super().__init__("no notes given for chord detection")


class InvalidTuning(FretnoterError):
    def __init__(self, text):
        self.text = text
        super().__init__(f"invalid tuning given: '{text}'")


class InvalidFretRange(FretnoterError):
    def __init__(self, frets, starting_fret):
        self.frets = frets
        self.starting_fret = starting_fret
        super().__init__(
            f"invalid fret range: {frets} frets from fret {starting_fret}"
        )
