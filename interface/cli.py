"""
Command line interface for hand ranking.

Usage:
  hand-ranking classify As Ks Qs Js Ts
  hand-ranking winner "2s 5c 7h Td Kh" "As Ks Qs Js Ts"
  hand-ranking demo
  hand-ranking serve
"""

import argparse
import sys
from typing import Dict, List, Optional

from loguru import logger

from config import API_CONFIG
from hand_ranking import Hand, determine_winner, parse_cards, construct_hand
from interface.logging_setup import setup_logging

SAMPLE_HANDS: Dict[str, str] = {
    "royal_flush": "Th Jh Qh Kh Ah",
    "straight_flush": "8s 9s Ts Js Qs",
    "four_of_a_kind": "9s 9c 9h 9d Kh",
    "full_house": "9s 9c Kh Kd Kh",
    "flush": "2h 5h 7h Th Kh",
    "straight": "8s 9c Th Jd Qh",
    "three_of_a_kind": "4s 9c 9h 9d Kh",
    "two_pair": "4s 4c 9h 9d Kh",
    "pair": "4s 4c 9h Jd Kh",
    "high_card": "2s 5c 7h Td Kh",
}

DEMO_MATCHES: List[List[str]] = [
    ["high_card", "two_pair", "royal_flush", "straight"],
    ["high_card", "straight_flush", "straight", "flush"],
]


def cmd_classify(args: argparse.Namespace) -> int:
    hand = construct_hand(parse_cards(" ".join(args.cards)))
    print(hand.category.label)
    return 0


def cmd_winner(args: argparse.Namespace) -> int:
    hands = [Hand.from_string(text) for text in args.hands]
    winner = determine_winner(hands)
    index = next(i for i, hand in enumerate(hands) if hand is winner)
    print(f"Hand {index + 1} wins: {winner} ({winner.category.label})")
    return 0


def cmd_demo(args: argparse.Namespace) -> int:
    samples = {name: Hand.from_string(text) for name, text in SAMPLE_HANDS.items()}
    if args.all:
        for name, hand in samples.items():
            print(f"{name:>16}: {hand}  ->  {hand.category.label}")
    for match in DEMO_MATCHES:
        winner = determine_winner([samples[name] for name in match])
        print(f"{' vs '.join(match)}: {winner.category.label}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    host = args.host if args.host is not None else API_CONFIG["host"]
    port = args.port if args.port is not None else API_CONFIG["port"]
    logger.info("Serving hand ranking API on {}:{}", host, port)
    uvicorn.run("interface.api:app", host=host, port=port, reload=API_CONFIG["debug"])
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hand-ranking", description="Classify and rank 5-card poker hands")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (e.g. DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    classify_parser = sub.add_parser("classify", help="Classify one hand")
    classify_parser.add_argument("cards", nargs="+", help="Cards such as As Kd Tc")
    classify_parser.set_defaults(func=cmd_classify)

    winner_parser = sub.add_parser("winner", help="Pick the best of several hands")
    winner_parser.add_argument("hands", nargs="+", help='Quoted hands such as "As Ks Qs Js Ts"')
    winner_parser.set_defaults(func=cmd_winner)

    demo_parser = sub.add_parser("demo", help="Run the sample match-ups")
    demo_parser.add_argument("--all", action="store_true", help="Also classify every sample hand")
    demo_parser.set_defaults(func=cmd_demo)

    serve_parser = sub.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=None)
    serve_parser.add_argument("--port", type=int, default=None)
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    try:
        return args.func(args)
    except ValueError as e:
        logger.debug("Invalid input for {}: {}", args.command, e)
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
