from apps.payments import (
    CheckoutSession,
    PaymentGateway,
    SessionInfo,
    GatewayError,
)


class FakeGateway(PaymentGateway):
    """In-memory gateway that records the sessions it creates."""

    name = 'fake'

    def __init__(self, *, fail_with=None, retrieve_fails=False):
        self.fail_with = fail_with
        self.retrieve_fails = retrieve_fails
        self.sessions = {}
        self.calls = []

    def create_checkout_session(self, **kwargs):
        self.calls.append(kwargs)
        if self.fail_with is not None:
            raise self.fail_with
        session_id = f'cs_test_{len(self.sessions) + 1}'
        session = CheckoutSession(
            session_id=session_id,
            url=f'https://pay.example.com/create/{session_id}',
        )
        self.sessions[session_id] = kwargs
        return session

    def retrieve_session(self, session_id):
        if self.retrieve_fails:
            raise GatewayError('lookup failed')
        return SessionInfo(
            session_id=session_id,
            url=f'https://pay.example.com/pay/{session_id}',
            status='open',
            payment_status='unpaid',
            metadata=self.sessions[session_id].get('metadata', {}),
        )
