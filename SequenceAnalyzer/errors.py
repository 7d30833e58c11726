class AnalyzerError(Exception):
    pass


# Fatal: the input document could not be read
class PrimaryInputUnreadable(AnalyzerError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read input file {path}: {reason}")


# Fatal: the rule file is missing or malformed
class ConfigurationError(AnalyzerError):
    pass


# Recoverable: one artifact is skipped, the others are still produced
class ArtifactWriteFailed(AnalyzerError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Error writing to {path}: {reason}")


# Recoverable: the report contributes no sequences
class ArtifactReadFailed(AnalyzerError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading {path}: {reason}")


# Recoverable: a report name does not carry an integer length
class NumericParseFailure(AnalyzerError):
    def __init__(self, name, fragment):
        self.name = name
        self.fragment = fragment
        super().__init__(f"Could not recover sequence length from '{name}' ('{fragment}' is not a number)")


# Fatal: the output folder cannot be created or listed
class OutputFolderUnavailable(AnalyzerError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Output folder {path} is not usable: {reason}")
