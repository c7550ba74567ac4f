import json
from datetime import datetime
from typing import Dict, List, Optional, Tuple

import matplotlib.pyplot as plt

from simulator.infrastructure.message_broker import (
    COMPLETED_TOPIC,
    REQUEST_ADDED_TOPIC,
    REQUEST_SERVICED_TOPIC,
    STATUS_TOPIC,
    TRIP_TOPIC,
    MessageBroker,
)


class Statistics:
    """
    Records everything the dispatcher publishes and reports on it.

    Reads the broker's broadcast pipe on collect(), so it can be called after
    each run() without a listener process of its own. Keeps the cabin
    trajectory, trips and serviced requests, and an event log in JSON Lines
    format for offline playback.
    """
    def __init__(self, broker: MessageBroker):
        self.broker = broker
        self.trajectory: List[Tuple[float, int]] = []  # (time, floor)
        self.trips: List[dict] = []
        self.serviced: List[dict] = []
        self.requests_added = 0
        self.completions = 0
        self.overweight_history: List[Tuple[float, bool]] = []

        self.event_log: List[dict] = []
        self.simulation_metadata: Dict = {}

    def set_simulation_metadata(self, metadata):
        """
        Set simulation metadata (written as the first line of the event log).

        Args:
            metadata (dict): Session configuration
        """
        self.simulation_metadata = {
            "format_version": "1.0",
            "timestamp": datetime.now().isoformat(),
            "config": metadata
        }

    def collect(self):
        """
        Pull every message published since the last call.

        Returns:
            int: Number of messages processed
        """
        broadcasts = self.broker.drain_broadcasts()
        for data in broadcasts:
            self._handle(data.get('topic', ''), data.get('message', {}))
        return len(broadcasts)

    def _handle(self, topic, message):
        self.event_log.append({
            "time": message.get('timestamp'),
            "type": topic,
            "data": {k: v for k, v in message.items() if k != 'timestamp'}
        })

        if topic == STATUS_TOPIC:
            point = (message.get('timestamp'), message.get('current_floor'))
            # Record if not exactly the same as the last data point
            if not self.trajectory or self.trajectory[-1] != point:
                self.trajectory.append(point)
            overweight = message.get('overweight', False)
            if not self.overweight_history or self.overweight_history[-1][1] != overweight:
                self.overweight_history.append((message.get('timestamp'), overweight))
        elif topic == TRIP_TOPIC:
            self.trips.append(message)
        elif topic == REQUEST_SERVICED_TOPIC:
            self.serviced.append(message)
        elif topic == REQUEST_ADDED_TOPIC:
            self.requests_added += 1
        elif topic == COMPLETED_TOPIC:
            self.completions += 1

    def get_floors_travelled(self) -> int:
        floors = [floor for _, floor in self.trajectory]
        return sum(abs(b - a) for a, b in zip(floors, floors[1:]))

    def get_summary(self) -> dict:
        """
        Aggregate metrics over everything collected so far.

        Waiting times are simulated seconds from submission to service.
        """
        wait_times = [s['wait_time'] for s in self.serviced if s.get('wait_time') is not None]
        by_kind: Dict[str, int] = {}
        by_mode: Dict[str, int] = {}
        for s in self.serviced:
            by_kind[s['kind']] = by_kind.get(s['kind'], 0) + 1
            by_mode[s['mode']] = by_mode.get(s['mode'], 0) + 1

        return {
            'requests_added': self.requests_added,
            'requests_serviced': len(self.serviced),
            'serviced_by_kind': by_kind,
            'serviced_by_mode': by_mode,
            'trips': len(self.trips),
            'floors_travelled': self.get_floors_travelled(),
            'average_wait_time': sum(wait_times) / len(wait_times) if wait_times else None,
            'max_wait_time': max(wait_times) if wait_times else None,
        }

    def print_summary(self):
        summary = self.get_summary()
        print("\n" + "=" * 60)
        print("   DISPATCH SUMMARY")
        print("=" * 60)
        print(f"  Requests added:    {summary['requests_added']:>6}")
        print(f"  Requests serviced: {summary['requests_serviced']:>6}")
        for kind, count in sorted(summary['serviced_by_kind'].items()):
            print(f"    {kind:<15} {count:>6}")
        for mode, count in sorted(summary['serviced_by_mode'].items()):
            print(f"    {mode:<15} {count:>6}")
        print(f"  Trips:             {summary['trips']:>6}")
        print(f"  Floors travelled:  {summary['floors_travelled']:>6}")
        if summary['average_wait_time'] is not None:
            print(f"  Average wait:      {summary['average_wait_time']:>6.2f} seconds")
            print(f"  Max wait:          {summary['max_wait_time']:>6.2f} seconds")
        print("=" * 60)

    def save_event_log(self, filename='dispatcher_log.jsonl'):
        """
        Save the event log to a JSON Lines file.

        Args:
            filename (str): Name of the output file
        """
        print(f"\nSaving event log to {filename}...")

        with open(filename, 'w', encoding='utf-8') as f:
            if self.simulation_metadata:
                f.write(json.dumps({
                    "type": "metadata",
                    "data": self.simulation_metadata
                }) + '\n')

            for event in self.event_log:
                f.write(json.dumps(event, ensure_ascii=False) + '\n')

        print(f"Event log saved: {len(self.event_log)} events written to {filename}")
        return filename

    def plot_trajectory_diagram(self, output_filename='elevator_trajectory_diagram.png', show=False) -> Optional[str]:
        """
        Draw the floor-over-time diagram of the cabin.

        Hall and car calls served are marked on the trajectory.

        Returns:
            The file written, or None when nothing was recorded
        """
        if not self.trajectory:
            print("No trajectory recorded, skipping plot.")
            return None

        print("\n--- Plotting: Elevator Trajectory Diagram ---")
        fig = plt.figure(figsize=(14, 8))

        times, floors = zip(*sorted(self.trajectory, key=lambda x: x[0]))
        plt.step(times, floors, where='post', label='Cabin', linewidth=2.5, color='#1f77b4', alpha=0.8)

        for s in self.serviced:
            if s['kind'] == 'hallway':
                marker = '↑' if s.get('direction') == 'UP' else '↓'
                plt.annotate(marker, (s['timestamp'], s['floor']), ha='center', va='center',
                             fontsize=14, color='#d62728')
            else:
                plt.scatter(s['timestamp'], s['floor'], s=60, facecolors='none', edgecolors='#2ca02c')

        plt.title("Elevator Trajectory Diagram")
        plt.xlabel("Time (s)")
        plt.ylabel("Floor")
        plt.grid(True, which='both', linestyle='--', alpha=0.7)
        plt.yticks(range(int(min(floors)), int(max(floors)) + 2))
        plt.legend(loc='upper right', fontsize=10)

        plt.savefig(output_filename, dpi=150, bbox_inches='tight')
        print(f"Trajectory diagram saved to: {output_filename}")

        if show:
            plt.show()
        plt.close(fig)
        return output_filename
