from mailchimp_oauth import MailchimpClient, MailchimpSettings

settings = MailchimpSettings(
    client_id="your-client-id",
    client_secret="your-client-secret",
    redirect_uri="http://127.0.0.1:8000/mailchimp/callback",
)
client = MailchimpClient(settings)

print("Open this URL and approve access:")
print(client.get_login_url(redirect_uri=settings.redirect_uri))

code = input("Paste the 'code' query parameter from the redirect: ").strip()
account = client.get_account_details(client.get_access_token(code))

lists = client.get("lists", {"count": 10}, account["dc"], access_token=account["access_token"])
for audience in lists.get("lists", []):
    print(audience["id"], audience["name"])
