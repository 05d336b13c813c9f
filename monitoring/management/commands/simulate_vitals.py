from django.core.management.base import BaseCommand

from monitoring.services.simulator import build_simulator


class Command(BaseCommand):
    help = "Run the vital simulator in the foreground until interrupted or for a fixed number of cycles."

    def add_arguments(self, parser):
        parser.add_argument('--cycles', type=int, default=None, help='Stop after this many cycles')
        parser.add_argument('--interval', type=float, default=None, help='Seconds between cycles')

    def handle(self, *args, **options):
        simulator = build_simulator(interval=options['interval'])
        self.stdout.write(f"Simulating vitals every {simulator.interval:g}s (Ctrl+C to stop)")
        try:
            cycles = simulator.run(max_cycles=options['cycles'])
        except KeyboardInterrupt:
            simulator.stop()
            self.stdout.write("Interrupted.")
            return
        self.stdout.write(self.style.SUCCESS(f"Completed {cycles} cycles."))
