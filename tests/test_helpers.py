"""
Test helper functions and utilities for reducing duplicate code across test modules
"""
from unittest.mock import AsyncMock, MagicMock


class EmailTestHelper:
    """Helper methods for building service responses"""

    @staticmethod
    def create_sent_email(**kwargs):
        """Create a sent email record as the service returns it"""
        defaults = {
            'object': 'email',
            'id': 'em_1',
            'from': 'Acme <no-reply@acme.com>',
            'to': ['user@example.com'],
            'subject': 'Test Subject',
            'created_at': '2025-10-02 10:30:00.000000+00',
            'html': '<p>Test body</p>',
            'text': 'Test body',
            'last_event': 'delivered',
        }
        defaults.update(kwargs)
        return defaults

    @staticmethod
    def create_sent_emails(count=2, **kwargs):
        """Create a newest-first listing"""
        return [
            EmailTestHelper.create_sent_email(
                id=f'em_{i + 1}',
                subject=f'Test Subject {i + 1}',
                **kwargs
            )
            for i in range(count)
        ]

    @staticmethod
    def create_received_email(**kwargs):
        """Create a received email record"""
        defaults = {
            'object': 'email',
            'id': 'E1',
            'from': 'friend@example.com',
            'to': ['me@acme.com'],
            'subject': 'Hello',
            'created_at': '2025-10-01 09:15:00.000000+00',
            'html': '<p>Original body</p>',
            'text': 'Original body',
        }
        defaults.update(kwargs)
        return defaults


class ClientTestHelper:
    """Helper methods for faking the API client"""

    @staticmethod
    def create_fake_client():
        """Create a client whose methods are AsyncMocks with sensible results"""
        client = MagicMock()
        client.send_email = AsyncMock(return_value={'id': 'em_new'})
        client.send_batch = AsyncMock(return_value={'data': [{'id': 'em_b1'}, {'id': 'em_b2'}]})
        client.list_emails = AsyncMock(return_value=[])
        client.get_email = AsyncMock(return_value=EmailTestHelper.create_sent_email())
        client.update_email = AsyncMock(return_value={'object': 'email', 'id': 'em_1'})
        client.cancel_email = AsyncMock(return_value={'object': 'email', 'id': 'em_1'})
        client.list_received_emails = AsyncMock(return_value=[])
        client.get_received_email = AsyncMock(return_value=EmailTestHelper.create_received_email())
        return client


class ResponseTestHelper:
    """Helper methods for faking requests responses"""

    @staticmethod
    def create_response(status_code=200, json_data=None, text=None):
        response = MagicMock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 400
        response.reason = 'OK' if response.ok else 'Error'
        if json_data is not None:
            response.json.return_value = json_data
            response.content = b'{...}'
            response.text = text or str(json_data)
        else:
            response.json.side_effect = ValueError('No JSON')
            response.content = (text or '').encode()
            response.text = text or ''
        return response

    @staticmethod
    def create_session(response=None):
        session = MagicMock()
        session.headers = {}
        session.request.return_value = response or ResponseTestHelper.create_response(json_data={})
        return session
