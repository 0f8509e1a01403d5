"""Command-line entrypoint mirroring the getoptx shell builtin.

usage: getoptx [-A array] [-c] [-e] [-E] [-l longspec]... [-n name] [-p] [-q]
               [-s scalar] [--] shortopts [arg ...]

Exit status: 0 when parsing succeeded, 1 when the input had parse errors,
2 for usage or configuration errors.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from pathlib import Path

from getoptx.classify import (
    ArgumentClassifier,
    EndOfOptions,
    MissingArgument,
    ShortOption,
    UnrecognizedOption,
)
from getoptx.config import (
    CliOverrides,
    GetoptxConfig,
    config_path_from_env,
    load_effective_config,
)
from getoptx.engine import (
    RESULT_USAGE_ERROR,
    TOOL_NAME,
    ReparseRequest,
    ReparseResult,
    reparse,
)
from getoptx.host import Host, ShellSourceHost, array_assignment, is_identifier
from getoptx.logging import AuditEvent, JsonlAuditLogger, sanitize_arguments, utc_timestamp
from getoptx.options import parse_short_spec

TOOL_FLAGS_SPEC = "+:A:ceEl:n:pqs:"


@dataclass(slots=True, frozen=True)
class Invocation:
    """Tool flags and operands of one command line."""

    short_spec: str | None
    tokens: tuple[str, ...] | None
    long_specs: tuple[str, ...]
    overrides: CliOverrides
    array_name: str | None = None
    scalar_name: str | None = None
    error: str | None = None


def parse_invocation(args: Sequence[str]) -> Invocation:
    """Split tool flags from the short spec and input tokens.

    ``tokens`` is None when nothing follows the short spec, meaning the
    host's positional parameters should be used.
    """
    flags: set[str] = set()
    long_specs: list[str] = []
    array_name: str | None = None
    scalar_name: str | None = None
    display_name: str | None = None
    operands: tuple[str, ...] = ()
    error: str | None = None

    classifier = ArgumentClassifier(parse_short_spec(TOOL_FLAGS_SPEC))
    for event in classifier.classify(args):
        if isinstance(event, UnrecognizedOption):
            error = f"bad option: {event.option}"
            break
        if isinstance(event, MissingArgument):
            error = f"argument expected after {event.option} option"
            break
        if isinstance(event, EndOfOptions):
            operands = event.operands
            # A lone "-" ends the tool flags like "--" and is consumed.
            if operands[:1] == ("-",) and not classifier.state.saw_terminator:
                operands = operands[1:]
            break
        if not isinstance(event, ShortOption):
            continue
        if event.letter == "A":
            array_name = event.value
        elif event.letter == "s":
            scalar_name = event.value
        elif event.letter == "n":
            display_name = event.value
        elif event.letter == "l":
            long_specs.append(event.value or "")
        else:
            flags.add(event.letter)

    short_spec: str | None = None
    tokens: tuple[str, ...] | None = None
    if error is None:
        if operands:
            short_spec = operands[0]
            tokens = operands[1:] or None
        else:
            error = "not enough arguments"

    overrides = CliOverrides(
        concat_numeric="c" in flags,
        elide_errors="e" in flags,
        abort_on_error="E" in flags,
        normalize_punctuation="p" in flags,
        quiet="q" in flags,
        display_name=display_name,
    )
    return Invocation(
        short_spec=short_spec,
        tokens=tokens,
        long_specs=tuple(long_specs),
        overrides=overrides,
        array_name=array_name,
        scalar_name=scalar_name,
        error=error,
    )


def run(args: Sequence[str], host: Host, config_path: Path | None = None) -> int:
    """Run one getoptx invocation against a host and return its exit status."""
    invocation = parse_invocation(args)
    config: GetoptxConfig | None = None
    error = invocation.error
    if error is None:
        try:
            config = load_effective_config(config_path, invocation.overrides)
        except (OSError, ValueError) as exc:
            error = f"invalid config: {exc}"

    quiet = _is_quiet(invocation, config)
    if error is not None or config is None or invocation.short_spec is None:
        diagnostics = () if quiet else (f"{TOOL_NAME}: {error}",)
        result = ReparseResult(code=RESULT_USAGE_ERROR, output="", diagnostics=diagnostics)
    else:
        tokens = invocation.tokens
        if tokens is None:
            tokens = host.positional_parameters()
        request = ReparseRequest(
            short_spec=invocation.short_spec,
            long_specs=invocation.long_specs,
            tokens=tuple(tokens),
            modes=config.modes,
            display_name=config.display_name or host.script_name() or TOOL_NAME,
        )
        result = reparse(request, quote=host.quote)

    for message in result.diagnostics:
        host.write_diagnostic(message)
    code = _deliver(invocation, result, host, quiet)
    if config is not None and config.audit_log_path is not None:
        try:
            _audit(JsonlAuditLogger(config.audit_log_path), invocation, config, result, code)
        except OSError as exc:
            # The result is already delivered; its status stands.
            if not quiet:
                host.write_diagnostic(f"{TOOL_NAME}: audit log not written: {exc}")
    return code


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for the getoptx command."""
    args = sys.argv[1:] if argv is None else argv
    host = ShellSourceHost(out_stream=sys.stdout, err_stream=sys.stderr)
    return run(args, host, config_path=config_path_from_env())


def _is_quiet(invocation: Invocation, config: GetoptxConfig | None) -> bool:
    if invocation.short_spec is not None and parse_short_spec(invocation.short_spec).quiet:
        return True
    if config is not None:
        return config.modes.quiet
    return invocation.overrides.quiet


def _deliver(invocation: Invocation, result: ReparseResult, host: Host, quiet: bool) -> int:
    # The target is assigned even when the result is empty.
    target = invocation.array_name if invocation.array_name is not None else invocation.scalar_name
    if target is None:
        if result.output:
            host.write_output(result.output)
        return result.code
    if not is_identifier(target):
        if not quiet:
            host.write_diagnostic(f"{TOOL_NAME}: not an identifier: {target}")
        return RESULT_USAGE_ERROR
    if invocation.array_name is not None:
        assigned = host.eval_array_assignment(array_assignment(target, result.output))
    else:
        assigned = host.assign_scalar(target, result.output)
    if not assigned:
        return RESULT_USAGE_ERROR
    return result.code


def _audit(
    logger: JsonlAuditLogger,
    invocation: Invocation,
    config: GetoptxConfig,
    result: ReparseResult,
    code: int,
) -> None:
    error_kind = {0: None, 1: "parse"}.get(code, "usage")
    arguments: dict[str, object] = {
        "short_spec": invocation.short_spec,
        "long_specs": list(invocation.long_specs),
        "tokens": list(invocation.tokens or ()),
        "array_target": invocation.array_name is not None,
        "scalar_target": invocation.scalar_name is not None,
        "output": result.output,
        "diagnostic_count": len(result.diagnostics),
    }
    arguments.update(asdict(config.modes))
    logger.append(
        AuditEvent(
            timestamp=utc_timestamp(),
            tool=TOOL_NAME,
            ok=code == 0,
            exit_code=code,
            error_kind=error_kind,
            metadata=sanitize_arguments(arguments),
        )
    )


if __name__ == "__main__":
    raise SystemExit(main())
