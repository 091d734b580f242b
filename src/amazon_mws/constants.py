"""Constants and configuration for Amazon MWS."""

# Marketplace ID -> region host
MARKETPLACES = {
    "A2EUQ1WTGCTBG2": "mws.amazonservices.ca",  # CA
    "ATVPDKIKX0DER": "mws.amazonservices.com",  # US
    "A1AM78C64UM0Y8": "mws.amazonservices.com.mx",  # MX
    "A1PA6795UKMFR9": "mws-eu.amazonservices.com",  # DE
    "A1RKKUPIHCS9HS": "mws-eu.amazonservices.com",  # ES
    "A13V1IB3VIYZZH": "mws-eu.amazonservices.com",  # FR
    "A21TJRUUN4KGV": "mws.amazonservices.in",  # IN
    "APJ6JRA9NG5V4": "mws-eu.amazonservices.com",  # IT
    "A1F83G8C2ARO7P": "mws-eu.amazonservices.com",  # UK
    "A1VC38T7YXB528": "mws.amazonservices.jp",  # JP
    "AAHKV2X7AFYLW": "mws.amazonservices.com.cn",  # CN
    "A39IBJ37TRP1C6": "mws.amazonservices.com.au",  # AU
    "A2Q3Y263D00KWC": "mws.amazonservices.com",  # BR
}

# Query authentication
SIGNATURE_METHOD = "HmacSHA256"
SIGNATURE_VERSION = "2"

# Timestamp format, always UTC with zeroed milliseconds
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.000Z"

APPLICATION_NAME = "AmazonMWS/Client"
DEFAULT_APPLICATION_VERSION = "0.0.*"

# Default request timeout (seconds)
DEFAULT_TIMEOUT = 5

# Per-call cardinality limits
MAX_PRICING_IDS = 20
MAX_MATCHING_PRODUCT_IDS = 5
MAX_INVENTORY_SKUS = 50

# Feed types
FEED_TYPES = {
    "PRODUCT": "_POST_PRODUCT_DATA_",
    "INVENTORY": "_POST_INVENTORY_AVAILABILITY_DATA_",
    "PRICING": "_POST_PRODUCT_PRICING_DATA_",
    "FLAT_FILE_LISTINGS": "_POST_FLAT_FILE_LISTINGS_DATA_",
}

FEED_CONTENT_TYPE = "text/xml; charset=UTF-8"
FEED_DOCUMENT_VERSION = "1.01"

# Flat-file listings feed (_POST_FLAT_FILE_LISTINGS_DATA_)
FLAT_FILE_ENCODING = "iso-8859-1"
FLAT_FILE_CONTENT_TYPE = f"text/tab-separated-values; charset={FLAT_FILE_ENCODING}"
FLAT_FILE_TEMPLATE = ["TemplateType=Offer", "Version=2014.0703"]
FLAT_FILE_HEADER = [
    "sku",
    "price",
    "quantity",
    "product-id",
    "product-id-type",
    "condition-type",
    "condition-note",
    "ASIN-hint",
    "title",
    "product-tax-code",
    "operation-type",
    "sale-price",
    "sale-start-date",
    "sale-end-date",
    "leadtime-to-ship",
    "launch-date",
    "is-giftwrap-available",
    "is-gift-message-available",
    "fulfillment-center-id",
    "main-offer-image",
    "offer-image1",
    "offer-image2",
    "offer-image3",
    "offer-image4",
    "offer-image5",
]

# Product id type -> required length
PRODUCT_ID_LENGTHS = {"ASIN": 10, "UPC": 12, "EAN": 13}

# Conditions accepted by the flat-file listings feed
LISTING_CONDITIONS = ["New", "Refurbished", "UsedLikeNew", "UsedVeryGood", "UsedGood", "UsedAcceptable"]

MAX_CONDITION_NOTE_LENGTH = 1000

# Report processing statuses
REPORT_DONE = "_DONE_"
REPORT_DONE_NO_DATA = "_DONE_NO_DATA_"

# Item conditions accepted by the pricing calls
ITEM_CONDITIONS = ["New", "Used", "Collectible", "Refurbished", "Club"]

# Order statuses
ORDER_STATUSES = [
    "PendingAvailability",
    "Pending",
    "Unshipped",
    "PartiallyShipped",
    "Shipped",
    "InvoiceUnconfirmed",
    "Canceled",
    "Unfulfillable",
]

# Fulfillment channels
FULFILLMENT_CHANNELS = ["AFN", "MFN"]

# Recommendation categories
RECOMMENDATION_CATEGORIES = [
    "Inventory",
    "Selection",
    "Pricing",
    "Fulfillment",
    "ListingQuality",
    "GlobalSelling",
    "Advertising",
]

