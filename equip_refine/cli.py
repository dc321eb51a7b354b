"""Command-line interface for equipment refinement."""
import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .controller import Outcome
from .display import category_lines
from .log import configure_logging
from .models import ParamKind
from .policy import RankPolicy
from .session import RefinementSession


def print_rank_table(policy: RankPolicy) -> None:
    """Print the max level and per-level bonus for every rank."""
    print("\n" + "=" * 60)
    print("  Refinement Ranks")
    print("=" * 60)
    print(f"{'Rank':<8} {'Max Level':<12} {'Bonus / Level':<14} {'Max Bonus':<10}")
    print("-" * 60)

    for rank in policy.ranks():
        max_level = policy.max_level(rank)
        per_level = policy.per_level_value(rank)
        print(f"{rank:<8} {'+' + str(max_level):<12} {per_level:<14} {max_level * per_level:<10}")

    print("=" * 60)
    for line in category_lines():
        print(f"  {line}")
    print()


def build_status(session: RefinementSession, actor_id: int) -> dict:
    """Collect an actor's equipment, bonuses and held materials."""
    actor = session.database.actor(actor_id)
    slots = []
    for row in session.display.slot_rows(actor_id):
        item = session.database.definition_of(row.item_id) if row.item_id is not None else None
        rank = item.rank if item else None
        slots.append({
            "slot": row.slot_index,
            "slot_name": row.slot_name,
            "item_id": row.item_id,
            "name": row.text,
            "rank": rank,
            "level": row.level,
            "max_level": session.policy.max_level(rank) if item else 0,
        })
    materials = {
        item.name: session.inventory.quantity_of(item.id)
        for item in sorted(session.database.all_material_definitions(), key=lambda i: i.id)
        if session.inventory.has_item(item.id)
    }
    return {
        "actor_id": actor_id,
        "actor": actor.name if actor else None,
        "slots": slots,
        "bonus": {
            "atk": session.projector.bonus_for(actor_id, ParamKind.ATK),
            "def": session.projector.bonus_for(actor_id, ParamKind.DEF),
        },
        "materials": materials,
    }


def print_status(status: dict) -> None:
    """Pretty print an actor's refinement status."""
    print("\n" + "=" * 60)
    print(f"  {status['actor']}: Equipment")
    print("=" * 60)
    print(f"{'Slot':<12} {'Item':<26} {'Rank':<6} {'Level':<8}")
    print("-" * 60)
    for slot in status["slots"]:
        rank = slot["rank"] or "-"
        level = f"{slot['level']}/{slot['max_level']}" if slot["item_id"] is not None else ""
        print(f"{slot['slot_name']:<12} {slot['name']:<26} {rank:<6} {level:<8}")

    print("-" * 60)
    print(f"  ATK bonus:  +{status['bonus']['atk']}")
    print(f"  DEF bonus:  +{status['bonus']['def']}")

    print("\n" + "-" * 60)
    print("  MATERIALS")
    print("-" * 60)
    if not status["materials"]:
        print("  (none)")
    for name, quantity in status["materials"].items():
        print(f"  {name:<30} x{quantity}")
    print("=" * 60)


def outcome_to_dict(outcome: Outcome) -> dict:
    return {
        "ok": outcome.ok,
        "kind": outcome.kind.value,
        "message": outcome.message,
        "level": outcome.level,
        "material_id": outcome.material_id,
    }


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Equipment refinement",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --show-rates                               # Show the rank table
  %(prog)s --data game.json --save save.json --status --actor 1
  %(prog)s --data game.json --save save.json --refine 20 --actor 1 --slot 0
  %(prog)s --data game.json --save save.json --auto --actor 1 --slot 3
        """,
    )

    parser.add_argument(
        "--data", "-d",
        type=Path,
        help="Game data JSON file (items, actors, starting party)",
    )
    parser.add_argument(
        "--save",
        type=Path,
        help="Save file; read if it exists, written after a refinement",
    )
    parser.add_argument(
        "--policy",
        type=Path,
        help="TOML file overriding the rank table",
    )
    parser.add_argument(
        "--actor", "-a",
        type=int,
        default=1,
        help="Actor id (default: 1)",
    )
    parser.add_argument(
        "--slot", "-s",
        type=int,
        default=0,
        help="Equipment slot index (default: 0)",
    )
    parser.add_argument(
        "--show-rates",
        action="store_true",
        help="Show the rank table",
    )
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show an actor's equipment (default action; after a refinement too)",
    )
    parser.add_argument(
        "--refine", "-r",
        type=int,
        metavar="MATERIAL_ID",
        help="Refine the slot with this material",
    )
    parser.add_argument(
        "--auto",
        action="store_true",
        help="Refine the slot with any held material of the right rank",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.show_rates:
        try:
            policy = RankPolicy.from_toml(args.policy) if args.policy else RankPolicy.default()
        except (OSError, ValueError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
        if args.json:
            print(json.dumps(policy.as_dict(), indent=2))
        else:
            print_rank_table(policy)
        return

    if args.data is None:
        print("Error: --data is required", file=sys.stderr)
        sys.exit(1)

    if args.refine is not None and args.auto:
        print("Error: use either --refine or --auto, not both", file=sys.stderr)
        sys.exit(1)

    try:
        session = RefinementSession.from_files(args.data, args.save, args.policy)
    except (OSError, ValueError, KeyError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.refine is None and not args.auto:
        if session.database.actor(args.actor) is None:
            print(f"Error: actor {args.actor} does not exist", file=sys.stderr)
            sys.exit(1)
        status = build_status(session, args.actor)
        if args.json:
            print(json.dumps(status, indent=2))
        else:
            print_status(status)
        return

    if args.auto:
        outcome = session.controller.auto_refine(args.actor, args.slot)
    else:
        outcome = session.controller.attempt_refine(args.actor, args.slot, args.refine)

    if outcome.ok and args.save is not None:
        session.save(args.save)

    if args.json:
        print(json.dumps(outcome_to_dict(outcome), indent=2))
    else:
        for message in session.messages.messages:
            print(message)
        if args.status and session.database.actor(args.actor) is not None:
            print_status(build_status(session, args.actor))

    if not outcome.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
