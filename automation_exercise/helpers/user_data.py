"""
Test Data

Records and generators for every fixture the suite feeds into forms and
API calls. Generators return a fresh record on each call; anything that
the remote site persists carries a unique id so repeated or parallel runs
never collide.
"""
import random
import string
import time
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional


def unique_id() -> str:
    """Return ``<epoch millis>-<6 random lowercase alphanumerics>``."""
    timestamp = int(time.time() * 1000)
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=6))
    return f"{timestamp}-{suffix}"


# =============================================================================
# Identity
# =============================================================================


@dataclass
class UserData:
    name: str
    email: str
    password: str
    first_name: str
    last_name: str
    address: str
    country: str
    state: str
    city: str
    zipcode: str
    mobile_number: str
    company: Optional[str] = None
    address2: Optional[str] = None


@dataclass
class AccountInfo:
    title: str  # "Mr" or "Mrs"
    name: str
    email: str
    password: str
    day: str
    month: str
    year: str
    newsletter: bool = False
    offers: bool = False


@dataclass
class AddressInfo:
    first_name: str
    last_name: str
    address: str
    country: str
    state: str
    city: str
    zipcode: str
    mobile_number: str
    company: Optional[str] = None
    address2: Optional[str] = None


@dataclass
class LoginCredentials:
    email: str
    password: str


# =============================================================================
# Catalog and cart
# =============================================================================


@dataclass
class ProductSearchData:
    search_term: str
    expected_results_count: Optional[int] = None


@dataclass
class ProductReviewData:
    name: str
    email: str
    review: str


@dataclass
class CategoryData:
    category: str
    subcategory: str
    expected_text: str


@dataclass
class BrandData:
    brand_name: str


@dataclass
class CartProductData:
    product_id: int
    quantity: int
    expected_price: Optional[str] = None


# =============================================================================
# Checkout and site features
# =============================================================================


@dataclass
class PaymentData:
    name_on_card: str
    card_number: str
    cvc: str
    expiration_month: str
    expiration_year: str


@dataclass
class CheckoutCommentData:
    comment: str


@dataclass
class ContactFormData:
    name: str
    email: str
    subject: str
    message: str
    file_name: Optional[str] = None


@dataclass
class SubscriptionData:
    email: str


# =============================================================================
# API payloads
# =============================================================================


@dataclass
class APIProductSearchData:
    search_product: str


@dataclass
class APIUserAccountData:
    name: str
    email: str
    password: str
    title: str
    birth_date: str
    birth_month: str
    birth_year: str
    firstname: str
    lastname: str
    company: str
    address1: str
    address2: str
    country: str
    zipcode: str
    state: str
    city: str
    mobile_number: str

    def to_form(self) -> Dict[str, str]:
        """Form fields for ``POST /api/createAccount``."""
        return asdict(self)


# =============================================================================
# Fixed records
# =============================================================================

VALID_LOGIN_DISPLAY_NAME = "Test Automation"
EXISTING_EMAIL = "testuser@example.com"

VALID_USER = UserData(
    name="John Doe",
    email="johndoe@example.com",
    password="validpassword123",
    first_name="John",
    last_name="Doe",
    company="Test Corp",
    address="456 Main Street",
    country="United States",
    state="New York",
    city="New York",
    zipcode="10001",
    mobile_number="+1987654321",
)

INVALID_USER = LoginCredentials(email="invalid@example.com", password="wrongpassword")


# =============================================================================
# Generators
# =============================================================================


def generate_unique_user() -> UserData:
    uid = unique_id()
    return UserData(
        name=f"Test Automation User {uid}",
        email=f"testuser+{uid}@example.com",
        password="SecurePassword123!",
        first_name="Test",
        last_name="Automation",
        company="Test Company",
        address="123 Test Street",
        address2="Apt 306A",
        country="Canada",
        state="Alberta",
        city="Edmonton",
        zipcode="T4X 0X4",
        mobile_number="+1234567890",
    )


def generate_account_info(user: UserData) -> AccountInfo:
    return AccountInfo(
        title="Mr",
        name=user.name,
        email=user.email,
        password=user.password,
        day="15",
        month="January",
        year="1990",
        newsletter=True,
        offers=True,
    )


def get_valid_login_credentials() -> LoginCredentials:
    """Credentials of the long-lived account registered on the remote site."""
    return LoginCredentials(email="testuser+dario@example.com", password="password123")


def get_invalid_login_credentials() -> LoginCredentials:
    return LoginCredentials(email=INVALID_USER.email, password=INVALID_USER.password)


def get_existing_email_for_registration() -> str:
    return EXISTING_EMAIL


def get_product_search_data() -> ProductSearchData:
    return ProductSearchData(search_term="tshirt", expected_results_count=3)


def get_product_review_data() -> ProductReviewData:
    return ProductReviewData(
        name="John Reviewer",
        email="reviewer@example.com",
        review=(
            "This is a great product! I highly recommend it for anyone "
            "looking for quality and style."
        ),
    )


def get_category_data() -> List[CategoryData]:
    return [
        CategoryData(category="Women", subcategory="Dress", expected_text="WOMEN - DRESS PRODUCTS"),
        CategoryData(category="Men", subcategory="Tshirts", expected_text="MEN - TSHIRTS PRODUCTS"),
    ]


def get_cart_products_data() -> List[CartProductData]:
    return [
        CartProductData(product_id=1, quantity=1, expected_price="Rs. 500"),
        CartProductData(product_id=2, quantity=1, expected_price="Rs. 400"),
    ]


def get_single_product_cart_data() -> CartProductData:
    return CartProductData(product_id=1, quantity=4, expected_price="Rs. 2000")


def get_payment_data() -> PaymentData:
    return PaymentData(
        name_on_card="John Doe",
        card_number="4242424242424242",
        cvc="123",
        expiration_month="12",
        expiration_year="2027",
    )


def get_checkout_comment() -> CheckoutCommentData:
    return CheckoutCommentData(comment="Please deliver during business hours. Thank you!")


def get_contact_form_data() -> ContactFormData:
    return ContactFormData(
        name="Test User",
        email="testuser@example.com",
        subject="Test Contact Form",
        message=(
            "This is a test message for the contact form functionality. "
            "Please ignore this message."
        ),
        file_name="test-upload.txt",
    )


def get_subscription_email() -> SubscriptionData:
    return SubscriptionData(email=f"subscribe+{unique_id()}@example.com")


def get_api_product_search_data() -> APIProductSearchData:
    return APIProductSearchData(search_product="top")


def get_api_user_account_data() -> APIUserAccountData:
    uid = unique_id()
    return APIUserAccountData(
        name=f"API Test User {uid}",
        email=f"apitest+{uid}@example.com",
        password="password123",
        title="Mr",
        birth_date="15",
        birth_month="6",
        birth_year="1990",
        firstname="API",
        lastname="User",
        company="Test Company",
        address1="123 Test Street",
        address2="Apt 4B",
        country="United States",
        zipcode="12345",
        state="California",
        city="Los Angeles",
        mobile_number="+1234567890",
    )


def get_api_login_credentials() -> LoginCredentials:
    # Same account the browser tests log in with
    return get_valid_login_credentials()


def get_api_invalid_login_credentials() -> LoginCredentials:
    return get_invalid_login_credentials()
