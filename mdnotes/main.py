from __future__ import annotations

import argparse
import webbrowser
from pathlib import Path

from mdnotes.cli import NotesShell
from mdnotes.errors import NoteError
from mdnotes.logging_setup import SESSION_ID, install_global_exception_hooks, log, setup_logging
from mdnotes.services.markdown_renderer import MarkdownRenderer
from mdnotes.settings import BACKENDS, StoreConfig, default_editor
from mdnotes.vault import open_store


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="mdnotes", description="Markdown note manager")
    p.add_argument(
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Folder holding notes/ (flat backend) or notes.json (json backend)",
    )
    p.add_argument("--backend", choices=BACKENDS, default="flat")
    p.add_argument("--editor", default=None, help="External editor command (default: $EDITOR or nano)")
    p.add_argument("-v", "--verbose", action="store_true", help="Echo INFO logs to stderr")

    sub = p.add_subparsers(dest="command")
    preview = sub.add_parser("preview", help="Render a note to HTML and open it in the browser")
    preview.add_argument("title")
    preview.add_argument("--no-open", action="store_true", help="Only write the HTML file")
    return p.parse_args(argv)


def run_preview(config: StoreConfig, title: str, *, open_browser: bool = True) -> Path:
    store = open_store(config)
    content = store.read(title)
    path = MarkdownRenderer().write_preview(content, config.preview_path, title=title)
    if open_browser:
        webbrowser.open(path.resolve().as_uri())
    return path


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)
    install_global_exception_hooks()

    config = StoreConfig(root=args.root, backend=args.backend)
    log.info("Starting, root=%s backend=%s SID=%s", config.root, config.backend, SESSION_ID)

    try:
        if args.command == "preview":
            path = run_preview(config, args.title, open_browser=not args.no_open)
            print(f"Preview written to {path}")
            return 0

        store = open_store(config)
    except NoteError as exc:
        log.error("%s", exc)
        print(exc)
        return 1

    shell = NotesShell(store, editor=args.editor or default_editor())
    return shell.run()


if __name__ == "__main__":
    raise SystemExit(main())
