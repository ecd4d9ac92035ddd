from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from apps.pv.models import PVResetRun
from apps.pv.schedule import due_period, next_reset_at
from apps.pv.services import MonthlyResetService, PVDisplayService
from apps.pv.tiers import get_tier_table


class Command(BaseCommand):
    help = 'Show PV ledger, discount tier and reset status'

    def add_arguments(self, parser):
        parser.add_argument(
            '--user-id',
            type=int,
            help='Show the ledger of this user',
        )

    def handle(self, *args, **options):
        user_id = options.get('user_id')

        if user_id:
            User = get_user_model()
            try:
                user = User.objects.get(id=user_id)
            except User.DoesNotExist:
                raise CommandError(f'User with ID {user_id} not found')

            summary = PVDisplayService.dashboard(user)
            roles = ', '.join(sorted(user.role_names)) or 'none'
            self.stdout.write(f'User: {user.username} (roles: {roles})')
            self.stdout.write(f'Monthly PV: {summary["current_pv"]}')
            self.stdout.write(f'Discount: {summary["discount_percent"]}%')
            self.stdout.write(f'Last PV order: {summary["last_pv_order"] or "never"}')
            self.stdout.write(f'PV expires on: {summary["expires_on"]}')
        else:
            self.stdout.write(f'Outstanding PV across ledgers: {MonthlyResetService.total_outstanding_pv()}')

        table = get_tier_table()
        for tier in table:
            upper = tier.upper if tier.upper is not None else 'inf'
            self.stdout.write(f'Tier ({tier.lower}, {upper}] -> {tier.percent}%')
        for after, up_to in table.gaps():
            self.stdout.write(self.style.WARNING(f'No tier covers ({after}, {up_to}]'))

        period = due_period()
        reset_run = PVResetRun.objects.filter(period=period).first()
        last_run = f'{reset_run.status}' if reset_run else 'not run'
        self.stdout.write(f'Last closed period {period}: {last_run}')
        self.stdout.write(self.style.SUCCESS(f'Next reset at {next_reset_at().isoformat()}'))
