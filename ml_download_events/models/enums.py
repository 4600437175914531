from enum import IntEnum


class EventName(IntEnum):
    """Top-level event kinds understood by the logging backend."""

    UNKNOWN_EVENT = 0
    MODEL_DOWNLOAD = 100
    MODEL_UPDATE = 101


class ErrorCode(IntEnum):
    """Error codes shared across the ML subsystems.

    1-99 belong to model inference, 100-199 to model downloading.  Values
    are part of the wire contract and must never be renumbered.
    """

    NO_ERROR = 0
    # download started under valid conditions but didn't finish
    DOWNLOAD_FAILED = 104
    # should never happen; a surge of these means a bug on our side
    UNKNOWN_ERROR = 9999


class DownloadStatus(IntEnum):
    """Stage reached by a model download.

    Values 1-6 are reserved for the model-info retrieval stages.
    """

    UNKNOWN_STATUS = 0
    SUCCEEDED = 7
    FAILED = 8


class ModelType(IntEnum):
    """Kind of model being downloaded.  Only custom models exist today."""

    CUSTOM = 1
