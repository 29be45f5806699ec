from django.urls import path
from . import views

app_name = 'conversations'

urlpatterns = [
    # GET        /api/marketplace/conversations/
    path('', views.conversation_list, name='conversation-list'),

    # GET, POST  /api/marketplace/conversations/{id}/messages/
    path('<uuid:conversation_id>/messages/', views.conversation_messages, name='conversation-messages'),
]
