import uuid

import pytest
from django.urls import reverse
from rest_framework import status


def _messages_url(conversation_id):
    return reverse('conversations:conversation-messages', args=[conversation_id])


@pytest.mark.django_db
class TestConversationList:
    """Tests for GET /api/marketplace/conversations/"""

    def test_lists_own_conversations(self, buyer_client, conversation):
        response = buyer_client.get(reverse('conversations:conversation-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['id'] == str(conversation.id)
        assert response.data[0]['listing_title'] == 'Mini Fridge'

    def test_outsider_sees_nothing(self, outsider_client, conversation):
        response = outsider_client.get(reverse('conversations:conversation-list'))

        assert response.data == []


@pytest.mark.django_db
class TestConversationMessages:
    """Tests for GET/POST /api/marketplace/conversations/{id}/messages/"""

    def test_participant_reads_messages(self, seller_client, conversation):
        response = seller_client.get(_messages_url(conversation.id))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['content'] == 'When can we meet?'

    def test_outsider_gets_404_on_read(self, outsider_client, conversation):
        response = outsider_client.get(_messages_url(conversation.id))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_participant_posts(self, seller_client, conversation):
        response = seller_client.post(
            _messages_url(conversation.id),
            {'content': 'Library lobby at noon?'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['sequence'] == 2

    def test_outsider_gets_403_on_post(self, outsider_client, conversation):
        response = outsider_client.post(
            _messages_url(conversation.id),
            {'content': 'Can I buy it instead?'},
            format='json',
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_blank_content(self, buyer_client, conversation):
        response = buyer_client.post(_messages_url(conversation.id), {'content': ''}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_conversation(self, buyer_client, db):
        response = buyer_client.post(_messages_url(uuid.uuid4()), {'content': 'Hi'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_requires_authentication(self, conversation):
        from rest_framework.test import APIClient
        response = APIClient().get(_messages_url(conversation.id))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
