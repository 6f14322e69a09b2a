"""
Exceptions raised by flashquiz.

Questions that simply cannot be asked right now (an empty card side, too few
decoys) are reported by returning None, not by raising.
"""


class FlashquizError(Exception):
    """Base class for all flashquiz errors"""


class BuildError(FlashquizError, ValueError):
    """Input handed to a set builder could not be turned into cards"""


class InvalidQuestionError(FlashquizError, IndexError):
    """A question refers to a card that is no longer in its set"""

    def __init__(self, kind: str, index: int, size: int):
        self.kind = kind
        self.index = index
        self.size = size
        super().__init__(f"{kind} question refers to card {index} but the set holds {size}")
