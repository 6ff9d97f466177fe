# src/promptify_scoring/demo.py
import argparse
import json
import logging
import sys
from pathlib import Path


def _print_result(payload: dict) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _cmd_score(args) -> int:
    from .engine import score

    result = score(args.target, args.generated, args.prompt)
    print("\n🎯 Phrase score:\n")
    _print_result(result.as_dict())
    return 0


def _cmd_art(args) -> int:
    from .engine import score_art

    target = Path(args.target_file).read_text(encoding="utf-8")
    generated = Path(args.generated_file).read_text(encoding="utf-8")
    result = score_art(target, generated, args.prompt)
    print("\n🖼️ Art score:\n")
    _print_result(result.as_dict())
    return 0


def _cmd_rounds(args) -> int:
    from .engine.rounds import load_rounds

    for r in load_rounds():
        print(f"Round {r.id} · {r.title} [{r.kind}]")
        for t in r.targets:
            print(f"  {t.id}: {t.text!r}")
    return 0


def _cmd_play(args) -> int:
    from .engine.llm import get_generator
    from .engine.orchestrator import play
    from .engine.rounds import get_target

    generator = get_generator(debug=args.debug)
    if generator is None:
        print("❌ Error: OPENROUTER_API_KEY is not set", file=sys.stderr)
        return 1

    target = get_target(args.sub_round)
    outcome = play(target, args.prompt, generator)
    print(f"\n🤖 Generated:\n{outcome.generated}\n")
    _print_result(outcome.result.as_dict())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promptify-demo",
        description="Score generated text against a hidden target and flag leaky prompts.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    sub = parser.add_subparsers(dest="command", required=True)

    p_score = sub.add_parser("score", help="Score text against a target phrase")
    p_score.add_argument("target", help="Hidden target phrase")
    p_score.add_argument("generated", help="Text produced by the model")
    p_score.add_argument("--prompt", required=True, help="Player's instruction")
    p_score.set_defaults(func=_cmd_score)

    p_art = sub.add_parser("art", help="Score ASCII art read from two files")
    p_art.add_argument("target_file")
    p_art.add_argument("generated_file")
    p_art.add_argument("--prompt", required=True, help="Player's instruction")
    p_art.set_defaults(func=_cmd_art)

    p_play = sub.add_parser("play", help="Generate with the model, then score a sub-round")
    p_play.add_argument("sub_round", help="Sub-round id, e.g. 1d")
    p_play.add_argument("--prompt", required=True, help="Player's instruction")
    p_play.set_defaults(func=_cmd_play)

    p_rounds = sub.add_parser("rounds", help="List the round catalog")
    p_rounds.set_defaults(func=_cmd_rounds)

    return parser


def main(argv=None):
    """CLI demo: score a phrase or ASCII art attempt, or play a catalog sub-round."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        code = args.func(args)
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
