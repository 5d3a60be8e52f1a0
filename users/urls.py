from django.urls import path
from .views import (
    RegisterView,
    VerifyEmailView,
    LoginUser,
    LogoutUser,
    UserListView,
)

urlpatterns = [
    path('register', RegisterView.as_view(), name='register'),
    path('verify-email/<str:token>', VerifyEmailView.as_view(), name='verify-email'),
    path('login', LoginUser.as_view(), name='login'),
    path('logout', LogoutUser.as_view(), name='logout'),
    path('users', UserListView.as_view(), name='user-list'),
]
