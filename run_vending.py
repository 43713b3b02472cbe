from __future__ import annotations

import argparse
import logging

from vending_demo.console import Console
from vending_demo.money import DEFAULT_CURRENCY
from vending_demo.session import VendingSession


def serve(session: VendingSession, console: Console) -> int:
    try:
        return session.run(console)
    except (EOFError, KeyboardInterrupt):
        # ввод закрыт посреди сессии: покупатель ушёл, возвращаем остаток
        console.say()
        return session.complete(console)


def main() -> None:
    p = argparse.ArgumentParser(description="Run one interactive vending machine session.")
    p.add_argument("--session-id", type=int, default=1)
    p.add_argument("--currency", type=str, default=DEFAULT_CURRENCY, help="Currency symbol shown before amounts")
    p.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="INFO prints every session event alongside the menu",
    )
    args = p.parse_args()

    # только текст сообщения, без уровня и имени логгера
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(message)s")

    serve(VendingSession(session_id=args.session_id), Console(currency=args.currency))


if __name__ == "__main__":
    main()
