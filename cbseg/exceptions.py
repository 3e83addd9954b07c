# cbseg/exceptions.py

class SegmentationError(Exception):
    pass


class ComputationError(SegmentationError):
    pass


class InvalidParameterError(SegmentationError, ValueError):
    pass
