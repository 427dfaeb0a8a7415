from prometheus_client import Counter, Histogram


class ReservationMetrics:
    """
    Reservation Engine Core Metrics Collector

    Tracks the hold / confirm / expire lifecycle; exposed at /metrics
    """

    def __init__(self) -> None:
        # ========== Hold Metrics ==========
        self.hold_requests = Counter(
            'reservation_hold_requests_total',
            'Hold requests by outcome',
            ['show_id', 'result'],  # result: success/conflict/error
        )

        self.held_seats = Counter(
            'reservation_held_seats_total',
            'Seats placed on hold',
            ['show_id'],
        )

        self.hold_duration = Histogram(
            'reservation_hold_duration_seconds',
            'Hold transaction duration',
            ['show_id'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        # ========== Confirmation Metrics ==========
        self.confirm_requests = Counter(
            'reservation_confirm_requests_total',
            'Confirmation requests by outcome',
            ['result'],  # result: success/conflict/error
        )

        # ========== Expiry Sweeper Metrics ==========
        self.expired_holds = Counter(
            'reservation_expired_holds_total',
            'Holds moved from HELD to EXPIRED by the sweeper',
        )

        self.sweep_runs = Counter(
            'reservation_expiry_sweeps_total',
            'Expiry sweeps by outcome',
            ['result'],
        )

    # ========== Helper Methods ==========

    def record_hold(self, *, show_id: int, result: str, seat_count: int = 0, duration: float = 0.0):
        self.hold_requests.labels(show_id=show_id, result=result).inc()
        if result == 'success':
            self.held_seats.labels(show_id=show_id).inc(seat_count)
            self.hold_duration.labels(show_id=show_id).observe(duration)

    def record_confirmation(self, *, result: str):
        self.confirm_requests.labels(result=result).inc()

    def record_sweep(self, *, result: str, expired_count: int = 0):
        self.sweep_runs.labels(result=result).inc()
        if expired_count:
            self.expired_holds.inc(expired_count)


# Global metrics instance
metrics = ReservationMetrics()
