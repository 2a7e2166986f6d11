import argparse
import asyncio
import pathlib
import sys
import typing

import pydantic
from loguru import logger

from tabdiff import adapter, data, service


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class DiffArgs:
    old: pathlib.Path
    new: pathlib.Path
    key: tuple[str, ...]
    compare: tuple[str, ...] | None
    output_format: typing.Literal["text", "json"]
    group_by: typing.Literal["row", "column"]


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class ColumnsArgs:
    file: pathlib.Path


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class PreviewArgs:
    file: pathlib.Path
    rows: pydantic.PositiveInt


def _parse_diff_args(args: argparse.Namespace, /) -> DiffArgs | data.Error:
    try:
        if not args.old:
            return data.Error.new("--old is required.")

        if not args.new:
            return data.Error.new("--new is required.")

        if not args.key:
            return data.Error.new("--key is required.")

        if len(set(args.key)) != len(args.key):
            return data.Error.new(f"--key contains duplicate columns: {args.key!r}.", diff_args=args)

        return DiffArgs(
            old=pathlib.Path(args.old),
            new=pathlib.Path(args.new),
            key=tuple(args.key),
            compare=tuple(args.compare) if args.compare else None,
            output_format=args.format,
            group_by=args.group_by,
        )
    except Exception as diff_error:
        return data.Error.new(str(diff_error), diff_args=args)


def _parse_columns_args(args: argparse.Namespace, /) -> ColumnsArgs | data.Error:
    try:
        if not args.file:
            return data.Error.new("--file is required.")

        return ColumnsArgs(file=pathlib.Path(args.file))
    except Exception as columns_error:
        return data.Error.new(str(columns_error), columns_args=args)


def _parse_preview_args(args: argparse.Namespace, /) -> PreviewArgs | data.Error:
    try:
        if not args.file:
            return data.Error.new("--file is required.")

        if args.rows < 1:
            return data.Error.new(f"--rows must be at least 1, but got {args.rows}.")

        return PreviewArgs(file=pathlib.Path(args.file), rows=args.rows)
    except Exception as preview_error:
        return data.Error.new(str(preview_error), preview_args=args)


async def _log_progress(sink: adapter.QueueProgressSink, /) -> None:
    last_phase: data.Phase | None = None
    last_decile = -1
    async for info in sink.events():
        decile = (info.percent or 0) // 10
        if info.phase != last_phase or decile != last_decile:
            logger.info(f"[{info.phase}] {info.percent}% {info.message or ''}".rstrip())
            last_phase = info.phase
            last_decile = decile


async def _compare(*, diff_args: DiffArgs, config: data.Config) -> data.CompareResult | data.Error:
    sink = adapter.QueueProgressSink(maxsize=config.progress_queue_size)
    consumer = asyncio.create_task(_log_progress(sink))
    try:
        return await service.compare_files(
            old_file=diff_args.old,
            new_file=diff_args.new,
            key_cols=diff_args.key,
            compare_cols=diff_args.compare,
            options=config.diff_options,
            on_progress=sink,
            timeout_seconds=config.timeout_seconds,
        )
    finally:
        sink.close()
        await consumer


def _diff(*, diff_args: DiffArgs, config: data.Config) -> None | data.Error:
    try:
        result = asyncio.run(_compare(diff_args=diff_args, config=config))
        if isinstance(result, data.Error):
            return result

        if diff_args.output_format == "json":
            print(adapter.render.render_json(result.diff))
        else:
            print(adapter.render.render_text(result.diff, group_by=diff_args.group_by))

        return None
    except Exception as e:
        return data.Error.new(str(e), diff_args=diff_args)


def _columns(*, columns_args: ColumnsArgs) -> None | data.Error:
    columns = service.list_columns(file=columns_args.file)
    if isinstance(columns, data.Error):
        return columns

    for column in columns:
        print(column)

    return None


def _preview(*, preview_args: PreviewArgs) -> None | data.Error:
    table = service.preview_rows(file=preview_args.file, n=preview_args.rows)
    if isinstance(table, data.Error):
        return table

    print(adapter.render.render_table(table))

    return None


def _run(args: argparse.Namespace, /, *, config: data.Config) -> None | data.Error:
    match cmd := args.command:
        case "diff":
            diff_args = _parse_diff_args(args)
            if isinstance(diff_args, data.Error):
                return diff_args

            return _diff(diff_args=diff_args, config=config)
        case "columns":
            columns_args = _parse_columns_args(args)
            if isinstance(columns_args, data.Error):
                return columns_args

            return _columns(columns_args=columns_args)
        case "preview":
            preview_args = _parse_preview_args(args)
            if isinstance(preview_args, data.Error):
                return preview_args

            return _preview(preview_args=preview_args)
        case _:
            return data.Error.new(f"Unrecognized command, {cmd!r}.", args=args)


def _load_config(config_file: str | None, /) -> data.Config | data.Error:
    if config_file:
        return adapter.config.load(config_file=pathlib.Path(config_file))

    default_config_path = adapter.fs.get_config_path()
    if isinstance(default_config_path, data.Error):
        return default_config_path

    if not default_config_path.exists():
        logger.info(f"No config file was found at {default_config_path!s}, so the defaults will be used.")
        return data.Config()

    return adapter.config.load(config_file=default_config_path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tabdiff")
    parser.add_argument("--config", type=str, default=None)
    subparser = parser.add_subparsers(dest="command")

    diff_parser = subparser.add_parser("diff")
    columns_parser = subparser.add_parser("columns")
    preview_parser = subparser.add_parser("preview")

    diff_parser.add_argument("--old", type=str, required=True)
    diff_parser.add_argument("--new", type=str, required=True)
    diff_parser.add_argument("--key", nargs="+", type=str, required=True)
    diff_parser.add_argument("--compare", nargs="+", type=str)
    diff_parser.add_argument("--format", choices=("text", "json"), default="text")
    diff_parser.add_argument("--group-by", choices=("row", "column"), default="row")

    columns_parser.add_argument("--file", type=str, required=True)

    preview_parser.add_argument("--file", type=str, required=True)
    preview_parser.add_argument("--rows", type=int, default=100)

    return parser


def main() -> None:
    try:
        if not getattr(sys, "frozen", False):
            logger.remove()
            logger.add(sys.stderr, level="INFO")

        log_folder = adapter.fs.get_log_folder()
        if isinstance(log_folder, data.Error):
            logger.error(f"An error occurred while looking up log folder: {log_folder!s}")
            sys.exit(1)

        logger.add(log_folder / "error.log", rotation="5 MB", retention="7 days", level="ERROR")

        args = build_parser().parse_args(sys.argv[1:])

        cfg = _load_config(args.config)
        if isinstance(cfg, data.Error):
            logger.error(f"An error occurred while loading config file: {cfg!s}")
            sys.exit(1)

        result = _run(args, config=cfg)
        if isinstance(result, data.Error):
            logger.error(str(result))
            sys.exit(1)

        logger.info("Done.")
    except Exception as e:
        logger.exception(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
