#!/usr/bin/env python3
"""Slot viewer script for utilsuite.

永続スロットの内容を確認・消去するための開発用CLIツール。

Usage:
    uv run python hack/slot_viewer.py slots
    uv run python hack/slot_viewer.py dump SavedNotes
    uv run python hack/slot_viewer.py clear SavedTodos
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from sqlmodel import select

# プロジェクトルートをパスに追加
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from utilsuite.config.loader import load_config  # noqa: E402
from utilsuite.infrastructure.persistence.database import DatabaseManager  # noqa: E402
from utilsuite.infrastructure.persistence.models import SlotModel  # noqa: E402
from utilsuite.infrastructure.persistence.slot_repository import (  # noqa: E402
    SQLiteSlotRepository,
)


def list_slots(db_manager: DatabaseManager) -> list[dict[str, Any]]:
    """スロット一覧を取得"""
    with db_manager.get_session() as session:
        models = session.exec(select(SlotModel).order_by(SlotModel.key)).all()
        return [
            {
                "key": m.key,
                "bytes": len(m.data),
                "updated_at": m.updated_at.isoformat() if m.updated_at else None,
            }
            for m in models
        ]


def print_slots(slots: list[dict[str, Any]], output_format: str) -> None:
    """スロット一覧を出力"""
    if output_format == "json":
        print(json.dumps(slots, indent=2, ensure_ascii=False))
        return

    if not slots:
        print("(no data)")
        return

    width = max(len(s["key"]) for s in slots)
    for s in slots:
        print(f"{s['key'].ljust(width)}  {s['bytes']:>8}  {s['updated_at'] or '-'}")
    print(f"\nTotal: {len(slots)} slots")


def dump_slot(slot: SQLiteSlotRepository, key: str) -> int:
    """スロットの内容を JSON として出力"""
    data = slot.read(key)
    if data is None:
        print(f"Error: slot not found: {key}", file=sys.stderr)
        return 1
    try:
        payload = json.loads(data.decode("utf-8"))
    except ValueError:
        print(f"Error: slot {key} does not contain valid JSON", file=sys.stderr)
        return 1
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """CLIパーサーを作成"""
    parser = argparse.ArgumentParser(
        description="utilsuite スロットビューア",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="config.yaml のパス (default: config.yaml)",
    )
    parser.add_argument(
        "--db",
        default=None,
        help="データベースファイルのパス (config より優先)",
    )
    parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="出力形式 (default: table)",
    )

    subparsers = parser.add_subparsers(dest="command", help="コマンド")
    subparsers.add_parser("slots", help="スロット一覧を表示")

    dump_parser = subparsers.add_parser("dump", help="スロットの内容を表示")
    dump_parser.add_argument("key", help="スロットのキー")

    clear_parser = subparsers.add_parser("clear", help="スロットを削除")
    clear_parser.add_argument("key", help="スロットのキー")

    return parser


def main() -> None:
    """メインエントリポイント"""
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # データベースパスを決定
    db_path: str
    if args.db:
        db_path = args.db
    else:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        db_path = load_config(config_path).storage.database_path

    db_manager = DatabaseManager(db_path)
    db_manager.create_tables()
    slot = SQLiteSlotRepository(db_manager.get_session)

    exit_code = 0
    try:
        if args.command == "slots":
            print_slots(list_slots(db_manager), args.format)
        elif args.command == "dump":
            exit_code = dump_slot(slot, args.key)
        elif args.command == "clear":
            if slot.delete(args.key):
                print(f"Cleared slot {args.key}")
            else:
                print(f"Slot not found: {args.key}", file=sys.stderr)
                exit_code = 1
    finally:
        db_manager.close()

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
