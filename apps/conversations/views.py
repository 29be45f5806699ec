from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    ConversationSerializer,
    MessageSerializer,
    MessageCreateSerializer,
)
from .services import (
    list_conversations_for_user,
    get_conversation_for_participant,
    list_messages,
    post_message,
    # Exceptions
    ConversationNotFoundError,
    NotParticipantError,
    EmptyMessageError,
)


@extend_schema(
    responses={200: ConversationSerializer(many=True)},
    description="Conversations the current student takes part in.",
    tags=['conversations'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def conversation_list(request):
    conversations = list_conversations_for_user(user=request.user)
    return Response(ConversationSerializer(conversations, many=True).data)


@extend_schema(
    methods=['GET'],
    responses={200: MessageSerializer(many=True)},
    description="Messages in a conversation, oldest first.",
    tags=['conversations'],
)
@extend_schema(
    methods=['POST'],
    request=MessageCreateSerializer,
    responses={201: MessageSerializer},
    description="Post a message as buyer or seller.",
    tags=['conversations'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def conversation_messages(request, conversation_id):
    """Read or append to a conversation's messages."""
    if request.method == 'GET':
        try:
            conversation = get_conversation_for_participant(
                conversation_id=conversation_id,
                user=request.user,
            )
        except ConversationNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        messages = list_messages(conversation=conversation)
        return Response(MessageSerializer(messages, many=True).data)

    serializer = MessageCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        message = post_message(
            conversation_id=conversation_id,
            sender=request.user,
            content=serializer.validated_data['content'],
        )
    except ConversationNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotParticipantError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except EmptyMessageError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(MessageSerializer(message).data, status=status.HTTP_201_CREATED)
