"""Example script demonstrating the group draw.

This script shows how to use the draw both programmatically and via the
command-line interface.
"""

# Bucket Draw
# Copyright (C) 2025  Bucket Draw developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bucketdraw.draw import DrawOrchestrator, GroupAssigner
from bucketdraw.files import read_entrants, render_text

EXAMPLES_DIR = Path(__file__).parent


def example_programmatic_draw():
    """Example: Drawing the example teams with a seeded generator."""

    print("\n" + "=" * 70)
    print("EXAMPLE 1: Programmatic Draw")
    print("=" * 70 + "\n")

    entrants = read_entrants(EXAMPLES_DIR / "teams.txt")

    # A dedicated generator per draw keeps the result reproducible
    orchestrator = DrawOrchestrator(GroupAssigner(random.Random(2025)))
    draw = orchestrator.run(entrants)

    print(render_text(draw))


def example_team_fixtures():
    """Example: Listing one team's fixtures."""

    print("\n" + "=" * 70)
    print("EXAMPLE 2: Fixtures for a Single Team")
    print("=" * 70 + "\n")

    entrants = read_entrants(EXAMPLES_DIR / "teams.txt")
    draw = DrawOrchestrator(GroupAssigner(random.Random(2025))).run(entrants)

    team = entrants[0]
    print(f"{team} was drawn into bucket {draw.group_of(team).label}")
    for pairing in draw.matches_for(team):
        print(f"  vs {pairing.opponent_of(team)}")


def example_cli_usage():
    """Example: Command-line usage."""

    print("\n" + "=" * 70)
    print("EXAMPLE 3: Command-Line Usage")
    print("=" * 70 + "\n")

    print("Draw from the example list:")
    print("  bucket-draw\n")

    print("Reproducible draw into a custom file:")
    print("  bucket-draw --input teams.txt --output results.txt --seed 2025\n")

    print("JSON report with a summary on stdout:")
    print("  bucket-draw --format json --output results.json --summary\n")


if __name__ == "__main__":
    example_programmatic_draw()
    example_team_fixtures()
    example_cli_usage()
