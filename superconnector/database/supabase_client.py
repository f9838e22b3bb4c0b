from supabase import create_client, Client, ClientOptions
from superconnector.config.settings import settings


class SupabaseClient:
    _client: Client = None

    @classmethod
    def _options(cls) -> ClientOptions:
        return ClientOptions(postgrest_client_timeout=settings.supabase_timeout)

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key, options=cls._options())
        return cls._client


def get_supabase() -> Client:
    return SupabaseClient.get_client()
