from prometheus_client import Counter, Histogram


class TicketingMetrics:
    """
    Ticketing core metrics collector

    Tracks seat reservations, payment proof uploads and organizer decisions,
    which together explain every movement of an event's seat inventory.
    """

    def __init__(self) -> None:
        # ========== Seat Inventory ==========
        self.reservation_requests = Counter(
            'ticketing_reservation_requests_total',
            'Seat reservation attempts by outcome',
            ['result'],  # result: success/no_seats/event_not_found/conflict
        )

        self.seats_released = Counter(
            'ticketing_seats_released_total',
            'Seats returned to inventory by rejected transactions',
        )

        # ========== Transaction Lifecycle ==========
        self.proof_uploads = Counter(
            'ticketing_proof_uploads_total',
            'Payment proof uploads by outcome',
            ['result'],
        )

        self.transaction_decisions = Counter(
            'ticketing_transaction_decisions_total',
            'Organizer decisions by decision and outcome',
            ['decision', 'result'],
        )

        self.operation_duration = Histogram(
            'ticketing_operation_duration_seconds',
            'Duration of inventory-changing operations',
            ['operation'],
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
        )

    # ========== Helper Methods ==========

    def record_reservation(self, *, result: str, duration: float) -> None:
        self.reservation_requests.labels(result=result).inc()
        self.operation_duration.labels(operation='reserve').observe(duration)

    def record_proof_upload(self, *, result: str) -> None:
        self.proof_uploads.labels(result=result).inc()

    def record_decision(self, *, decision: str, result: str, duration: float) -> None:
        self.transaction_decisions.labels(decision=decision, result=result).inc()
        self.operation_duration.labels(operation='decide').observe(duration)
        if decision == 'REJECT' and result == 'success':
            self.seats_released.inc()


# Global metrics instance
metrics = TicketingMetrics()
