"""Configuration for the Mailchimp OAuth client."""
from functools import lru_cache
from pydantic_settings import BaseSettings


class MailchimpSettings(BaseSettings):
    """Client settings loaded from MAILCHIMP_* environment variables."""
    
    # OAuth application credentials
    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""
    
    # Hosts
    login_host: str = "https://login.mailchimp.com/"
    api_host_template: str = "https://<dc>.api.mailchimp.com/3.0/"
    
    # Request timeout in seconds
    timeout: float = 4.0
    
    # Security settings for the OAuth routes
    secret_key: str = "change-this-to-a-secure-random-key-in-production"
    cookie_name: str = "mailchimp_session"
    cookie_max_age: int = 3600  # 1 hour in seconds
    state_cookie_name: str = "mailchimp_oauth_state"
    state_max_age: int = 600  # 10 minutes to complete the consent screen
    
    class Config:
        env_prefix = "MAILCHIMP_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        frozen = True


@lru_cache
def get_settings() -> MailchimpSettings:
    """Return the process-wide settings instance."""
    return MailchimpSettings()
