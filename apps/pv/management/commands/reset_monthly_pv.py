from django.core.management.base import BaseCommand, CommandError

from apps.pv.exceptions import ResetPartialFailure, report_pv_error
from apps.pv.schedule import next_reset_at
from apps.pv.services import MonthlyResetService


class Command(BaseCommand):
    help = 'Reset distributors\' monthly PV at the end of the month (cron: 59 23 28-31 * *)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--period',
            help='Month to close as YYYY-MM (default: the latest month that has ended)',
        )
        parser.add_argument(
            '--force',
            action='store_true',
            help='Close the period even if its month has not ended yet',
        )
        parser.add_argument(
            '--user-id',
            type=int,
            action='append',
            dest='user_ids',
            help='Reset only this user (repeatable)',
        )

    def handle(self, *args, **options):
        try:
            period, cutoff = MonthlyResetService.resolve_period(options.get('period'), force=options['force'])
        except ValueError as e:
            raise CommandError(str(e))

        self.stdout.write(f'Resetting monthly PV for {period} (cutoff {cutoff.isoformat()})...')

        try:
            reset_run = MonthlyResetService.run(
                period=period,
                force=options['force'],
                user_ids=options.get('user_ids'),
            )
        except ResetPartialFailure as e:
            report_pv_error(e, command='reset_monthly_pv')
            raise CommandError(
                f'PV reset for {e.period} failed for {len(e.failed_user_ids)} users: {e.failed_user_ids}. '
                f'Run the command again to retry them.'
            )

        if reset_run.status == reset_run.EARLY:
            self.stdout.write(
                self.style.WARNING(
                    f'PV for {reset_run.period} reset early. Ledgers reset: {reset_run.users_reset}. '
                    f'The period stays open until {next_reset_at().isoformat()}'
                )
            )
            return

        self.stdout.write(
            self.style.SUCCESS(
                f'PV reset for {reset_run.period} {reset_run.status}. '
                f'Ledgers reset: {reset_run.users_reset}. Next reset at {next_reset_at().isoformat()}'
            )
        )
