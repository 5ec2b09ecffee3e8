"""Exception types shared across vtt2srt modules."""


class ConversionError(Exception):
    pass


class SourceNotFoundError(ConversionError):
    def __init__(self, path: str):
        super().__init__(f"File {path} not found.")
        self.path = path


class SourceReadError(ConversionError):
    def __init__(self, path: str):
        super().__init__(f"Error reading file {path}.")
        self.path = path


class FilenameReadError(ConversionError):
    pass


class EmptyFilenameError(ConversionError):
    def __init__(self, message: str = "Empty filename."):
        super().__init__(message)
