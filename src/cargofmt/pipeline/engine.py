# topmark:header:start
#
#   project      : CargoFmt
#   file         : engine.py
#   file_relpath : src/cargofmt/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run a pipeline over a list of manifests (engine layer).

No CLI dependencies: this module never imports Click or anything under
``cargofmt.cli``. It returns structured results plus the first error code and
only logs; callers decide how to surface errors.

Typical usage:

    results, err = run_steps_for_files(
        file_list=manifests, pipeline=Pipeline.CHECK.steps, config_loader=resolve_config
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.core.exit_codes import ExitCode
from cargofmt.errors import ConfigError, ManifestError, VerificationError
from cargofmt.pipeline import runner
from cargofmt.pipeline.context import ProcessingContext

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.config.model import Config
    from cargofmt.pipeline.steps.base import BaseStep

logger: CargofmtLogger = get_logger(__name__)


def run_steps_for_files(
    *,
    file_list: Sequence[Path],
    pipeline: Sequence[BaseStep],
    config_loader: Callable[[Path], Config],
) -> tuple[list[ProcessingContext], ExitCode | None]:
    """Run a pipeline for each manifest and return (results, encountered_error_code).

    Args:
        file_list: Manifests to process, in order.
        pipeline: The pipeline steps to execute for each manifest.
        config_loader: Returns the formatter configuration for a manifest path.

    Returns:
        tuple[list[ProcessingContext], ExitCode | None]: The contexts of the
            manifests that were processed without a fatal error, and the first
            non-success exit code encountered (None when there was none).

    Exit code mapping:
        FILE_NOT_FOUND
            `FileNotFoundError`, `IsADirectoryError`.
        PERMISSION_DENIED
            `PermissionError`.
        ENCODING_ERROR
            `UnicodeDecodeError`, or a manifest that is not valid TOML.
        CONFIG_ERROR
            An unreadable or invalid config file.
        IO_ERROR
            Any other `OSError`, typically while writing.
        PIPELINE_ERROR
            Verification failures and any other unexpected exception.

    Notes:
        Later manifests are still processed after an error.
    """
    results: list[ProcessingContext] = []
    encountered_error_code: ExitCode | None = None

    for path in file_list:
        try:
            ctx_obj: ProcessingContext = ProcessingContext.bootstrap(
                path=path, config=config_loader(path)
            )
            ctx_obj = runner.run(ctx_obj, pipeline)
            results.append(ctx_obj)
        except (FileNotFoundError, IsADirectoryError) as e:
            logger.error("%s: %s", path, e)
            encountered_error_code = encountered_error_code or ExitCode.FILE_NOT_FOUND
        except PermissionError as e:
            logger.error("%s: %s", path, e)
            encountered_error_code = encountered_error_code or ExitCode.PERMISSION_DENIED
        except UnicodeDecodeError as e:
            logger.error("Encoding error while reading %s: %s", path, e)
            encountered_error_code = encountered_error_code or ExitCode.ENCODING_ERROR
        except ManifestError as e:
            logger.error("Invalid manifest: %s", e)
            encountered_error_code = encountered_error_code or ExitCode.ENCODING_ERROR
        except ConfigError as e:
            logger.error("Invalid config: %s", e)
            encountered_error_code = encountered_error_code or ExitCode.CONFIG_ERROR
        except VerificationError as e:
            logger.error("%s", e)
            encountered_error_code = encountered_error_code or ExitCode.PIPELINE_ERROR
        except OSError as e:
            logger.error("I/O error while processing %s: %s", path, e)
            encountered_error_code = encountered_error_code or ExitCode.IO_ERROR
        except Exception as e:  # pragma: no cover
            logger.exception("Unexpected error processing %s: %s", path, e)
            encountered_error_code = encountered_error_code or ExitCode.PIPELINE_ERROR

    return results, encountered_error_code
