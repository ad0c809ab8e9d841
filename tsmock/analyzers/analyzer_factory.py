from typing import Sequence

from loguru import logger

from tsmock.analyzers.typescript_analyzer import TypeScriptSchemaAnalyzer
from tsmock.exceptions import UnsupportedLanguageError


class AnalyzerFactory:

    @staticmethod
    def create_analyzer(language: str = "typescript", route_marker: str = "route",
                        strict_parse: bool = True, ignore_dirs: Sequence[str] = ()):
        logger.info(f"Creating analyzer for language: {language}, strict_parse: {strict_parse}")
        if language.lower() in ("typescript", "ts"):
            return TypeScriptSchemaAnalyzer(route_marker, strict_parse, ignore_dirs)
        raise UnsupportedLanguageError(f"Unsupported language: {language}")
