class SequenceError(Exception):
    """base class for errors raised by seqy terminals"""
    pass


class EmptySequenceError(SequenceError, ValueError):
    """a terminal needed at least one element and the sequence had none"""
    pass
