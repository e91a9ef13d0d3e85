import logging
import random
from datetime import date, timedelta

from faker import Faker
from sqlalchemy.orm import Session

from shared.core.database import Base, SessionLocal, engine
from shared.models.email_template import EmailTemplate

from pharmacy_service.app.models import (
    Branch, Category, City, Country, Lot, Manufacturer, Presentation,
    Product, ProductImage, ProductPresentation, State
)

logging.basicConfig(level=logging.INFO,
                    format="%(asctime)s [%(levelname)s]: %(message)s")
logger = logging.getLogger(__name__)

# Create tables
Base.metadata.create_all(bind=engine)

fake = Faker()

MEASUREMENT_UNITS = ["mg", "ml", "g", "pills", "capsules"]

OTP_TEMPLATE_HTML = "<p>Hi {name},</p><p>Your verification code is <b>{otp}</b></p>"
OTP_TEMPLATE_TEXT = "Hi {name}, your verification code is {otp}"


def seed_email_templates(db: Session):
    exists = db.query(EmailTemplate).filter(
        EmailTemplate.name == "otp_verification").first()
    if not exists:
        db.add(EmailTemplate(name="otp_verification",
                             html=OTP_TEMPLATE_HTML, text=OTP_TEMPLATE_TEXT))


def seed_locations(db: Session):
    cities = []
    countries = []
    for _ in range(3):
        country = Country(name=fake.unique.country())
        db.add(country)
        countries.append(country)

        for _ in range(4):
            state = State(name=fake.unique.state(), country=country)
            db.add(state)

            for _ in range(3):
                city = City(name=fake.city(), state=state)
                db.add(city)
                cities.append(city)

                for branch_index in range(1, 3):
                    db.add(Branch(
                        name=f"{city.name} Pharmacy {branch_index}",
                        address=fake.street_address(),
                        latitude=round(float(fake.latitude()), 6),
                        longitude=round(float(fake.longitude()), 6),
                        city=city,
                    ))
    db.flush()
    return countries, cities


def seed_catalog(db: Session, countries):
    categories = [
        Category(name=name, description=fake.sentence(nb_words=8))
        for name in ["Analgesics", "Antibiotics", "Vitamins", "Dermatology",
                     "Cardiology", "Respiratory"]
    ]
    db.add_all(categories)

    manufacturers = [
        Manufacturer(name=fake.company(), description=fake.catch_phrase(),
                     country=random.choice(countries))
        for _ in range(8)
    ]
    db.add_all(manufacturers)

    presentations = [
        Presentation(
            name=f"{quantity} {unit}",
            description=fake.sentence(nb_words=6),
            quantity=quantity,
            measurement_unit=unit,
        )
        for unit in MEASUREMENT_UNITS
        for quantity in (10, 30, 100)
    ]
    db.add_all(presentations)
    db.flush()

    for _ in range(40):
        generic_name = fake.word().capitalize()
        product = Product(
            name=f"{generic_name} {fake.random_element(['Forte', 'Plus', 'Max', 'Kids'])}",
            generic_name=generic_name,
            description=fake.paragraph(nb_sentences=2),
            priority=random.randint(1, 10),
            manufacturer=random.choice(manufacturers),
        )
        product.categories = random.sample(categories, k=2)
        db.add(product)
        db.flush()

        db.add(ProductImage(url=fake.image_url(), product_id=product.id))

        for presentation in random.sample(presentations, k=2):
            item = ProductPresentation(
                price=random.randint(100, 5000),
                product_id=product.id,
                presentation_id=presentation.id,
            )
            db.add(item)
            db.flush()
            db.add(Lot(
                expiration_date=date.today() +
                timedelta(days=random.randint(30, 720)),
                product_presentation_id=item.id,
            ))


def seed_data():
    db: Session = SessionLocal()
    try:
        seed_email_templates(db)
        countries, _ = seed_locations(db)
        seed_catalog(db, countries)

        db.commit()
        logger.info(
            "Database seeded with locations, branches, catalog and email templates.")

    except Exception as e:
        db.rollback()
        logger.error(f"Error seeding data: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_data()
