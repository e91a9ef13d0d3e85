# Import all models to ensure they are registered with SQLAlchemy
from shared.models.users import Users
from shared.models.profile import Profile
from shared.models.user_otp import UserOTP
from shared.models.email_template import EmailTemplate
from .locations.country import Country
from .locations.state import State
from .locations.city import City
from .locations.branch import Branch
from .catalog.category import Category
from .catalog.manufacturer import Manufacturer
from .catalog.presentation import Presentation
from .catalog.product import Product, product_category
from .catalog.product_image import ProductImage
from .catalog.product_presentation import ProductPresentation
from .catalog.lot import Lot
from .marketing.coupon import Coupon
from .marketing.promo import Promo
