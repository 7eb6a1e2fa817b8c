#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exception classes raised by api2md.

Everything raised on purpose derives from :class:`Api2MdError`, so callers
can catch one type. Link resolution problems are not exceptions: emitters
log them and drop the link.

Exception Hierarchy
-------------------
- Api2MdError

  - ValidationError (bad arguments or options)
    - InvalidOptionsError (options object of the wrong class for an emitter)

  - ApiModelError (API model file cannot be read or understood)

  - RenderingError (producing output failed)
    - UnsupportedNodeKindError (emitter has no case for a node kind)
    - OutputWriteError (output folder or page could not be written)

"""

from typing import Any


class Api2MdError(Exception):
    """Root of the api2md exception hierarchy.

    Parameters
    ----------
    message : str
        What went wrong
    original_error : Exception, optional
        Lower-level exception being wrapped

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Api2MdError):
    """An argument or option value was rejected.

    ``parameter_name`` and ``parameter_value`` identify the offending input
    when it is known.
    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """An emitter was handed an options object it cannot use.

    Parameters
    ----------
    emitter_name : str
        Class name of the emitter
    expected_type : type
        Options class the emitter accepts
    received_type : type
        Class of the object actually passed
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        emitter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(
            message
            or f"{emitter_name} expected options of type '{expected_type.__name__}' "
            f"but received '{received_type.__name__}'.",
            parameter_name="options",
            parameter_value=received_type,
            original_error=original_error,
        )
        self.emitter_name = emitter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ApiModelError(Api2MdError):
    """An API model file is missing, unparsable or structurally wrong.

    ``file_path`` is set when the problem belongs to a specific file.
    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class RenderingError(Api2MdError):
    """Producing output failed.

    ``rendering_stage`` names the step that failed, such as ``"write_node"``
    or ``"file_write"``.
    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnsupportedNodeKindError(RenderingError):
    """A node kind reached an emitter that has no case for it.

    The node taxonomy and the emitters are out of sync; the render call is
    aborted.

    Parameters
    ----------
    kind : str
        Value of the unhandled ``DocNodeKind``
    emitter_name : str, optional
        Class name of the emitter

    """

    def __init__(self, kind: str, emitter_name: str | None = None):
        suffix = f" (in {emitter_name})" if emitter_name else ""
        super().__init__(f"Unsupported DocNode kind: {kind}{suffix}", rendering_stage="write_node")
        self.kind = kind
        self.emitter_name = emitter_name


class OutputWriteError(RenderingError):
    """A page or the output folder could not be written.

    Parameters
    ----------
    file_path : str
        File or folder being written
    message : str, optional
        Overrides the default ``Failed to write output file`` message
    original_error : Exception, optional
        The ``OSError`` behind the failure

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        super().__init__(
            message or f"Failed to write output file: {file_path}",
            rendering_stage="file_write",
            original_error=original_error,
        )
        self.file_path = file_path
