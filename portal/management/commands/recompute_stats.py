from django.core.management.base import BaseCommand, CommandError

from portal.models import Member
from portal.services import recompute_stats


class Command(BaseCommand):
    help = "Rebuild cached trazos/words/activity totals from the activity history."

    def add_arguments(self, parser):
        parser.add_argument(
            "--member",
            type=int,
            action="append",
            dest="member_ids",
            help="Member id to rebuild (repeatable). Defaults to every member.",
        )

    def handle(self, *args, **options):
        member_ids = options.get("member_ids") or list(Member.objects.order_by("id").values_list("id", flat=True))
        changed = 0
        for member_id in member_ids:
            before = Member.objects.filter(pk=member_id).values_list(
                "total_trazos", "total_words", "total_activities"
            ).first()
            if before is None:
                raise CommandError(f"Member {member_id} does not exist.")
            stats = recompute_stats(member_id)
            if before != (stats.total_trazos, stats.total_words, stats.total_activities):
                changed += 1
                self.stdout.write(f"member {member_id}: {before} -> {stats.as_dict()}")
        self.stdout.write(self.style.SUCCESS(f"Recomputed {len(member_ids)} member(s), {changed} corrected."))
