"""Management command — run the matching pipeline for one profile."""
import logging
import uuid

from django.core.management.base import BaseCommand, CommandError

from apps.matching.engine import run_advanced_matching
from apps.matching.types import MatchRequest, Preferences
from apps.profiles.models import Profile

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Compute, persist and print matches for a profile."

    def add_arguments(self, parser):
        parser.add_argument("profile_id", type=uuid.UUID)
        parser.add_argument(
            "--role",
            choices=["investor", "entrepreneur"],
            default=None,
            help="Requesting role (default: the profile's user_type)",
        )
        parser.add_argument(
            "--sector",
            action="append",
            default=[],
            help="Preferred sector (repeatable)",
        )
        parser.add_argument("--location", type=str, default=None)
        parser.add_argument("--min-funding", type=float, default=None)
        parser.add_argument("--max-funding", type=float, default=None)

    def handle(self, *args, **options):
        profile_id = options["profile_id"]
        role = options["role"]
        if role is None:
            user_type = (
                Profile.objects.filter(pk=profile_id).values_list("user_type", flat=True).first()
            )
            if user_type is None:
                raise CommandError(f"Profile {profile_id} not found")
            if user_type not in ("investor", "entrepreneur"):
                raise CommandError(f"Profile {profile_id} is '{user_type}'; pass --role")
            role = user_type

        funding_range = None
        if options["min_funding"] is not None or options["max_funding"] is not None:
            if options["min_funding"] is None or options["max_funding"] is None:
                raise CommandError("--min-funding and --max-funding go together")
            if options["min_funding"] > options["max_funding"]:
                raise CommandError("--min-funding must be <= --max-funding")
            funding_range = (options["min_funding"], options["max_funding"])

        request = MatchRequest(
            requesting_user_id=profile_id,
            requesting_user_role=role,
            preferences=Preferences(
                sectors=tuple(options["sector"]),
                location=options["location"],
                funding_range=funding_range,
            ),
        )

        try:
            result = run_advanced_matching(request)
        except Profile.DoesNotExist:
            raise CommandError(f"Profile {profile_id} not found")

        for rank, match in enumerate(result.matches, 1):
            label = match.candidate.label
            marker = "IA" if match.ai_derived else "--"
            self.stdout.write(f"{rank:>2}. [{marker}] {match.score:5.1f}  {label}")
            for reason in match.reasons:
                self.stdout.write(f"        - {reason}")

        failed = sum(1 for o in result.persisted if not o.ok)
        if failed:
            self.stderr.write(f"{failed} match(es) could not be saved")

        self.stdout.write(
            self.style.SUCCESS(
                f"\nDone: {result.total} matches, {result.ai_analyzed} AI-analyzed"
            )
        )
