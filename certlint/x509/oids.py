"""Object identifiers referenced by the lint corpus (dotted-string form)."""

# Subject / issuer attribute types
COMMON_NAME = "2.5.4.3"
SURNAME = "2.5.4.4"
COUNTRY_NAME = "2.5.4.6"
LOCALITY_NAME = "2.5.4.7"
STATE_OR_PROVINCE_NAME = "2.5.4.8"
ORGANIZATION_NAME = "2.5.4.10"
ORGANIZATIONAL_UNIT_NAME = "2.5.4.11"
GIVEN_NAME = "2.5.4.42"
EMAIL_ADDRESS = "1.2.840.113549.1.9.1"

# Extensions
SUBJECT_KEY_IDENTIFIER = "2.5.29.14"
KEY_USAGE = "2.5.29.15"
SUBJECT_ALT_NAME = "2.5.29.17"
BASIC_CONSTRAINTS = "2.5.29.19"
CERTIFICATE_POLICIES = "2.5.29.32"
AUTHORITY_KEY_IDENTIFIER = "2.5.29.35"
EXTENDED_KEY_USAGE = "2.5.29.37"
AUTHORITY_INFORMATION_ACCESS = "1.3.6.1.5.5.7.1.1"

# Extended key usages
EKU_SERVER_AUTH = "1.3.6.1.5.5.7.3.1"
EKU_CLIENT_AUTH = "1.3.6.1.5.5.7.3.2"
EKU_EMAIL_PROTECTION = "1.3.6.1.5.5.7.3.4"

# CA/Browser Forum reserved policy identifiers
BR_DOMAIN_VALIDATED = "2.23.140.1.2.1"
BR_ORGANIZATION_VALIDATED = "2.23.140.1.2.2"
BR_INDIVIDUAL_VALIDATED = "2.23.140.1.2.3"
EV_GUIDELINES = "2.23.140.1.1"

# S/MIME BR policy identifiers: 2.23.140.1.5.<type>.<generation>
SMIME_MAILBOX_LEGACY = "2.23.140.1.5.1.1"
SMIME_MAILBOX_MULTIPURPOSE = "2.23.140.1.5.1.2"
SMIME_MAILBOX_STRICT = "2.23.140.1.5.1.3"
SMIME_ORGANIZATION_LEGACY = "2.23.140.1.5.2.1"
SMIME_ORGANIZATION_MULTIPURPOSE = "2.23.140.1.5.2.2"
SMIME_ORGANIZATION_STRICT = "2.23.140.1.5.2.3"
SMIME_SPONSORED_LEGACY = "2.23.140.1.5.3.1"
SMIME_SPONSORED_MULTIPURPOSE = "2.23.140.1.5.3.2"
SMIME_SPONSORED_STRICT = "2.23.140.1.5.3.3"
SMIME_INDIVIDUAL_LEGACY = "2.23.140.1.5.4.1"
SMIME_INDIVIDUAL_MULTIPURPOSE = "2.23.140.1.5.4.2"
SMIME_INDIVIDUAL_STRICT = "2.23.140.1.5.4.3"

SMIME_LEGACY_POLICIES = frozenset(
    {
        SMIME_MAILBOX_LEGACY,
        SMIME_ORGANIZATION_LEGACY,
        SMIME_SPONSORED_LEGACY,
        SMIME_INDIVIDUAL_LEGACY,
    }
)
