import base64

from hypothesis import strategies as st

from blob_bridge.clients.azure.models import AccountConfig

# Strategy for generating storage account names (3-24 lower case alphanumerics)
account_name_strategy = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyz0123456789", min_size=3, max_size=24
)

# Strategy for generating valid base64 account keys
account_key_strategy = st.binary(min_size=16, max_size=64).map(
    lambda raw: base64.b64encode(raw).decode("ascii")
)

# Strategy for generating arbitrary, possibly empty, field values
any_field_strategy = st.text(max_size=40)

# Configurations that must fail validation: development storage off and at
# least one credential empty
incomplete_config_strategy = st.one_of(
    st.builds(
        AccountConfig,
        account_name=st.just(""),
        account_key=any_field_strategy,
        use_development_storage=st.just(False),
    ),
    st.builds(
        AccountConfig,
        account_name=account_name_strategy,
        account_key=st.just(""),
        use_development_storage=st.just(False),
    ),
)

# Development storage configurations, whatever the credentials
development_config_strategy = st.builds(
    AccountConfig,
    account_name=any_field_strategy,
    account_key=any_field_strategy,
    use_development_storage=st.just(True),
)

# Complete shared key configurations
shared_key_config_strategy = st.builds(
    AccountConfig,
    account_name=account_name_strategy,
    account_key=account_key_strategy,
    use_development_storage=st.just(False),
)
