from ._checks import (
    check_directory,
    check_file,
    directory_exists,
    file_exists,
    validate_directory,
    validate_file,
)
from ._copy import (
    copy_file,
    copy_matching_files,
    delete_matching_files,
    replace_matching_files,
)
from ._discover import find_subdirectories_containing, iter_subdirectories_containing
from ._exceptions import FSMPatternError, FSMSegmentError
from ._match import compare_higher, numeric_rank
from ._resolve import first_existing_directory, maximise_path, resolve_matches
from ._segments import LiteralSegment, PatternSegment, Segment
from ._typing import FSMValidation

__all__ = [
    "directory_exists",
    "file_exists",
    "check_directory",
    "check_file",
    "validate_directory",
    "validate_file",
    "copy_file",
    "copy_matching_files",
    "delete_matching_files",
    "replace_matching_files",
    "maximise_path",
    "resolve_matches",
    "compare_higher",
    "numeric_rank",
    "first_existing_directory",
    "find_subdirectories_containing",
    "iter_subdirectories_containing",
    "LiteralSegment",
    "PatternSegment",
    "Segment",
    "FSMSegmentError",
    "FSMPatternError",
    "FSMValidation",
]
__version__ = "0.1.0"
