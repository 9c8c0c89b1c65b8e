from .supabase_auth import SupabaseAuthClient, SupabaseAuthError
from .cloudinary import CloudinaryClient, CloudinaryError, sign_params
from .resend import ResendClient, ResendError

__all__ = [
    'SupabaseAuthClient',
    'SupabaseAuthError',
    'CloudinaryClient',
    'CloudinaryError',
    'sign_params',
    'ResendClient',
    'ResendError',
]
