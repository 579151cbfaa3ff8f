"""
Errors - Failure taxonomy shared by the core, adapters and delivery layers

"Not found" outcomes are never errors: they travel as result values
(see domain.SegmentSearchResult / domain.CompanySearchResult).
"""


class CnabError(Exception):
    """Base exception for cnab-rows errors"""

    error_type = "unexpected"


class ConfigurationError(CnabError):
    """Invalid or incompatible option combination, raised before any file access"""

    error_type = "configuration"


class CnabFileNotFoundError(CnabError, FileNotFoundError):
    """Input path does not resolve to an existing file"""

    error_type = "file_not_found"

    def __init__(self, path):
        self.path = path
        super().__init__(f"Arquivo não encontrado em: {path}")


class WriteError(CnabError):
    """Export directory or file could not be written"""

    error_type = "write_error"

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Falha ao gravar {path}: {reason}")
