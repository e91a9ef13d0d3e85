import uuid

import pytest

from pharmacy_service.app.models import Presentation, Product, ProductImage, ProductPresentation


@pytest.fixture
def manufacturer(client, admin_headers, location_tree):
    return client.post("/manufacturer", json={
        "name": "Laboratorios Leti",
        "description": "Generic drugs",
        "countryId": location_tree["country"]["id"],
    }, headers=admin_headers).json()


@pytest.fixture
def category(client, admin_headers):
    return client.post("/category", json={"name": "Analgesics",
                                          "description": "Pain relief"},
                       headers=admin_headers).json()


@pytest.fixture
def presentation(client, admin_headers):
    return client.post("/presentation", json={
        "name": "Box of 20",
        "description": "20 tablets",
        "quantity": 20,
        "measurementUnit": "pills",
    }, headers=admin_headers).json()


def product_payload(manufacturer, category, presentation, **overrides):
    payload = {
        "name": "Atamel Forte",
        "genericName": "Paracetamol",
        "description": "650 mg tablets",
        "priority": 1,
        "manufacturer": manufacturer["id"],
        "categoryIds": [category["id"]],
        "imageUrls": ["https://img.example.com/atamel.png"],
        "presentations": [{"presentationId": presentation["id"], "price": 350}],
    }
    payload.update(overrides)
    return payload


# ----------------------------------------------------------------------
# Categories
# ----------------------------------------------------------------------

def test_category_lifecycle(client, admin_headers):
    response = client.post("/category", json={"name": "Vitamins",
                                              "description": "Supplements"},
                           headers=admin_headers)
    assert response.status_code == 201
    created = response.json()
    assert created["id"]

    fetched = client.get(f"/category/{created['id']}").json()
    assert fetched["name"] == "Vitamins"
    assert fetched["description"] == "Supplements"

    assert client.delete(f"/category/{created['id']}", headers=admin_headers).status_code == 204
    assert client.get(f"/category/{created['id']}").status_code == 404


def test_branch_admin_can_manage_categories(client, branch_admin_headers):
    response = client.post("/category", json={"name": "Dermatology",
                                              "description": "Skin care"},
                           headers=branch_admin_headers)
    assert response.status_code == 201


def test_customer_cannot_create_category(client, customer_headers):
    response = client.post("/category", json={"name": "X", "description": "Y"},
                           headers=customer_headers)
    assert response.status_code == 403


def test_category_description_is_limited(client, admin_headers):
    response = client.post("/category", json={"name": "Long", "description": "x" * 256},
                           headers=admin_headers)
    assert response.status_code == 422


def test_categories_are_public(client, category):
    body = client.get("/category").json()
    assert body["count"] == 1
    assert body["results"][0]["name"] == "Analgesics"


# ----------------------------------------------------------------------
# Manufacturers and presentations
# ----------------------------------------------------------------------

def test_manufacturer_reads_require_catalog_role(client, manufacturer, customer_headers):
    assert client.get("/manufacturer").status_code == 401
    assert client.get("/manufacturer", headers=customer_headers).status_code == 403


def test_manufacturer_filter_by_country(client, admin_headers, manufacturer, location_tree):
    body = client.get("/manufacturer", params={"countryId": location_tree["country"]["id"]},
                      headers=admin_headers).json()
    assert body["count"] == 1
    assert body["results"][0]["country"]["name"] == "Venezuela"


def test_manufacturer_with_unknown_country_is_not_found(client, admin_headers):
    response = client.post("/manufacturer", json={"name": "Ghost", "countryId": str(uuid.uuid4())},
                           headers=admin_headers)
    assert response.status_code == 404


def test_presentation_update(client, branch_admin_headers, presentation):
    response = client.patch(f"/presentation/{presentation['id']}", json={"quantity": 30},
                            headers=branch_admin_headers)
    assert response.status_code == 200
    assert response.json()["quantity"] == 30
    assert response.json()["measurementUnit"] == "pills"


def test_deleted_manufacturer_is_hidden_from_listing(client, admin_headers, manufacturer):
    url = f"/manufacturer/{manufacturer['id']}"
    assert client.delete(url, headers=admin_headers).status_code == 204
    assert client.get("/manufacturer", headers=admin_headers).json()["count"] == 0
    assert client.get(url, headers=admin_headers).status_code == 404


def test_deleted_presentation_is_hidden_from_listing(client, admin_headers, presentation):
    url = f"/presentation/{presentation['id']}"
    assert client.delete(url, headers=admin_headers).status_code == 204
    assert client.get("/presentation", headers=admin_headers).json()["count"] == 0
    assert client.get(url, headers=admin_headers).status_code == 404


# ----------------------------------------------------------------------
# Products
# ----------------------------------------------------------------------

def test_create_product_with_relations(client, admin_headers, manufacturer, category, presentation):
    response = client.post("/product", json=product_payload(manufacturer, category, presentation),
                           headers=admin_headers)
    assert response.status_code == 201
    product = response.json()
    assert product["genericName"] == "Paracetamol"
    assert product["manufacturer"]["id"] == manufacturer["id"]
    assert [c["id"] for c in product["categories"]] == [category["id"]]
    assert [i["url"] for i in product["images"]] == ["https://img.example.com/atamel.png"]
    assert product["presentations"][0]["price"] == 350
    assert product["presentations"][0]["presentation"]["id"] == presentation["id"]


def test_product_listing_returns_presentations(client, admin_headers, manufacturer,
                                               category, presentation):
    client.post("/product", json=product_payload(manufacturer, category, presentation),
                headers=admin_headers)

    body = client.get("/product").json()
    assert body["count"] == 1
    item = body["results"][0]
    assert item["price"] == 350
    assert item["presentation"]["name"] == "Box of 20"
    assert item["product"]["name"] == "Atamel Forte"
    assert item["product"]["manufacturer"]["name"] == "Laboratorios Leti"
    assert item["product"]["categories"][0]["name"] == "Analgesics"


def test_product_creation_is_atomic(client, db, admin_headers, manufacturer, category, presentation):
    payload = product_payload(manufacturer, category, presentation, presentations=[
        {"presentationId": presentation["id"], "price": 100},
        {"presentationId": str(uuid.uuid4()), "price": 200},
    ])
    response = client.post("/product", json=payload, headers=admin_headers)
    assert response.status_code == 404

    assert db.query(Product).count() == 0
    assert db.query(ProductImage).count() == 0
    assert db.query(ProductPresentation).count() == 0


def test_product_with_unknown_category_is_not_found(client, admin_headers, manufacturer,
                                                    category, presentation):
    payload = product_payload(manufacturer, category, presentation,
                              categoryIds=[str(uuid.uuid4())])
    assert client.post("/product", json=payload, headers=admin_headers).status_code == 404


def test_product_update_replaces_categories(client, admin_headers, manufacturer,
                                            category, presentation):
    product = client.post("/product", json=product_payload(manufacturer, category, presentation),
                          headers=admin_headers).json()
    other = client.post("/category", json={"name": "Fever", "description": "Antipyretics"},
                        headers=admin_headers).json()

    response = client.patch(f"/product/{product['id']}",
                            json={"priority": 5, "categoryIds": [other["id"]]},
                            headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["priority"] == 5
    assert [c["name"] for c in response.json()["categories"]] == ["Fever"]


def test_deleted_product_disappears_from_listing(client, admin_headers, manufacturer,
                                                 category, presentation):
    product = client.post("/product", json=product_payload(manufacturer, category, presentation),
                          headers=admin_headers).json()

    assert client.delete(f"/product/{product['id']}", headers=admin_headers).status_code == 204
    assert client.get(f"/product/{product['id']}").status_code == 404
    assert client.get("/product").json()["count"] == 0


def test_product_presentation_subresource(client, admin_headers, manufacturer,
                                          category, presentation):
    product = client.post("/product", json=product_payload(
        manufacturer, category, presentation, presentations=[]), headers=admin_headers).json()

    created = client.post(f"/product/{product['id']}/presentation",
                          json={"presentationId": presentation["id"], "price": 990},
                          headers=admin_headers)
    assert created.status_code == 201
    item_id = created.json()["id"]

    url = f"/product/{product['id']}/presentation/{item_id}"
    assert client.get(url).json()["price"] == 990

    updated = client.patch(url, json={"price": 1200}, headers=admin_headers)
    assert updated.json()["price"] == 1200

    lot = client.post(f"{url}/lot", json={"expirationDate": "2030-01-31"},
                      headers=admin_headers)
    assert lot.status_code == 201
    assert lot.json()["expirationDate"] == "2030-01-31"
    assert client.get(url).json()["lots"][0]["expirationDate"] == "2030-01-31"

    assert client.delete(url, headers=admin_headers).status_code == 204
    assert client.get(url).status_code == 404


def test_product_images(client, admin_headers, manufacturer, category, presentation):
    product = client.post("/product", json=product_payload(manufacturer, category, presentation),
                          headers=admin_headers).json()

    image = client.post(f"/product/{product['id']}/image",
                        json={"url": "https://img.example.com/back.png"},
                        headers=admin_headers)
    assert image.status_code == 201
    assert len(client.get(f"/product/{product['id']}").json()["images"]) == 2

    response = client.delete(f"/product/{product['id']}/image/{image.json()['id']}",
                             headers=admin_headers)
    assert response.status_code == 204
    assert len(client.get(f"/product/{product['id']}").json()["images"]) == 1


def test_manufacturer_with_products_cannot_be_deleted(client, admin_headers, manufacturer,
                                                      category, presentation):
    product = client.post("/product", json=product_payload(manufacturer, category, presentation),
                          headers=admin_headers).json()

    url = f"/manufacturer/{manufacturer['id']}"
    response = client.delete(url, headers=admin_headers)
    assert response.status_code == 400
    assert client.get("/product").json()["results"][0]["product"]["manufacturer"]["deletedAt"] is None

    assert client.delete(f"/product/{product['id']}", headers=admin_headers).status_code == 204
    assert client.delete(url, headers=admin_headers).status_code == 204


def test_presentation_in_use_cannot_be_deleted(client, admin_headers, manufacturer,
                                               category, presentation):
    product = client.post("/product", json=product_payload(manufacturer, category, presentation),
                          headers=admin_headers).json()

    url = f"/presentation/{presentation['id']}"
    assert client.delete(url, headers=admin_headers).status_code == 400
    assert client.get("/product").json()["count"] == 1

    assert client.delete(f"/product/{product['id']}", headers=admin_headers).status_code == 204
    assert client.delete(url, headers=admin_headers).status_code == 204


def test_product_listing_skips_deleted_presentations(client, db, admin_headers, manufacturer,
                                                     category, presentation):
    client.post("/product", json=product_payload(manufacturer, category, presentation),
                headers=admin_headers)
    db.get(Presentation, uuid.UUID(presentation["id"])).soft_delete()
    db.commit()

    body = client.get("/product").json()
    assert body["count"] == 0
    assert body["results"] == []
