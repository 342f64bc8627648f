import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from translingo.client.gateway import GatewayClient
from translingo.client.languages import DEFAULT_SOURCE_LANGUAGE
from translingo.client.session import ClientSession
from translingo.client.storage import LocalStorage
from translingo.core.config import get_settings
from translingo.core.errors import ClientError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="translingo")
    parser.add_argument("--gateway", default=None,
                        help="Gateway base URL (default: $TRANSLINGO_GATEWAY_URL)")
    parser.add_argument("--storage", default=None,
                        help="Local storage file (default: $TRANSLINGO_STORAGE)")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the translation gateway")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    sub.add_parser("languages", help="List languages supported upstream")

    translate = sub.add_parser("translate", help="Translate text")
    translate.add_argument("text")
    translate.add_argument("--from", dest="source",
                           default=DEFAULT_SOURCE_LANGUAGE)
    translate.add_argument("--to", dest="targets", action="append",
                           default=[], metavar="CODE")
    translate.add_argument("--copy", action="store_true")

    history = sub.add_parser("history", help="Manage translation history")
    history_sub = history.add_subparsers(dest="action")
    history_sub.add_parser("list")
    delete = history_sub.add_parser("delete")
    delete.add_argument("id")
    clear = history_sub.add_parser("clear")
    clear.add_argument("--yes", action="store_true")
    reuse = history_sub.add_parser("reuse")
    reuse.add_argument("id")
    reuse.add_argument("--copy", action="store_true")

    theme = sub.add_parser("theme", help="Show or toggle the theme")
    theme.add_argument("--toggle", action="store_true")
    return parser


def print_results(session: ClientSession, copy: bool = False):
    for label, text in session.rendered:
        print(f"{label}: {text}")
    if copy and session.copy_results():
        print("Copied to clipboard.")


def print_history(session: ClientSession):
    items = session.history_items()
    if not items:
        print("Your translation history will appear here.")
        return
    for item in items:
        print(f"[{item['id']}] {item['when']}")
        print(f"  {item['source']}")
        for label, text in item["translations"]:
            print(f"    {label}: {text}")


def confirm_clear() -> bool:
    answer = input("Are you sure you want to clear all translation history? [y/N] ")
    return answer.strip().lower() in ("y", "yes")


async def run_session(args) -> int:
    gateway = GatewayClient(args.gateway)
    storage = LocalStorage(args.storage)

    async with ClientSession(gateway, storage) as session:
        if args.command == "languages":
            try:
                data = await gateway.languages()
            except ClientError as e:
                print(f"Error: {e.message}", file=sys.stderr)
                return 1
            for code, info in sorted(data.get("translation", {}).items()):
                print(f"{code}\t{info.get('name', '')}")
            return 0

        if args.command == "translate":
            session.set_text(args.text)
            session.select_source_language(args.source)
            session.set_targets(args.targets)
            if not await session.translate():
                print(session.message, file=sys.stderr)
                return 1
            print_results(session, args.copy)
            return 0

        if args.command == "history":
            action = args.action or "list"
            if action == "list":
                print_history(session)
            elif action == "delete":
                if not session.delete_history_entry(args.id):
                    print(f"No history entry {args.id}", file=sys.stderr)
                    return 1
            elif action == "clear":
                confirm = (lambda: True) if args.yes else confirm_clear
                if session.clear_history(confirm):
                    print("History cleared.")
            elif action == "reuse":
                if not session.replay(args.id):
                    print(f"No history entry {args.id}", file=sys.stderr)
                    return 1
                print(f"{session.source_language}: {session.text}")
                print_results(session, args.copy)
            return 0

        if args.command == "theme":
            if args.toggle:
                session.toggle_theme()
            print("dark" if session.dark_mode else "light")
            return 0

    return 0


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        from translingo.main import run

        settings = get_settings()
        run(args.host or settings.host, args.port or settings.port)
        return 0

    logging.basicConfig(level=logging.WARNING,
                        format='%(asctime)s - %(name)s - %(message)s')
    return asyncio.run(run_session(args))


if __name__ == "__main__":
    sys.exit(main())
