import uuid

from shared.utils.enums import UserRole

from conftest import bearer


def new_user_payload(**overrides):
    payload = {
        "firstName": "Luis",
        "lastName": "Gomez",
        "email": "luis@example.com",
        "password": "Password123",
        "documentId": "E-8001",
        "birthDate": "1988-02-29",
        "role": "branch_admin",
    }
    payload.update(overrides)
    return payload


def test_owner_can_read_own_profile(client, customer):
    response = client.get(f"/user/{customer.id}", headers=bearer(customer))
    assert response.status_code == 200
    body = response.json()
    assert body["email"] == customer.email
    assert body["birthDate"] == "1990-05-17"
    assert body["role"] == "customer"
    assert "password" not in body


def test_admin_can_read_any_profile(client, admin_headers, customer):
    assert client.get(f"/user/{customer.id}", headers=admin_headers).status_code == 200


def test_other_user_cannot_read_profile(client, make_user, customer):
    intruder = make_user()
    response = client.get(f"/user/{customer.id}", headers=bearer(intruder))
    assert response.status_code == 403


def test_profile_of_unknown_user_is_not_found(client, admin_headers):
    assert client.get(f"/user/{uuid.uuid4()}", headers=admin_headers).status_code == 404


def test_list_users_is_admin_only(client, customer_headers):
    assert client.get("/user", headers=customer_headers).status_code == 403


def test_list_users_with_role_filter(client, admin, admin_headers, make_user):
    make_user(UserRole.DELIVERY)
    make_user(UserRole.DELIVERY)
    make_user(UserRole.CUSTOMER)

    body = client.get("/user", headers=admin_headers).json()
    assert body["count"] == 4
    assert all("profile" in user for user in body["results"])

    body = client.get("/user", params={"role": "delivery", "limit": 1},
                      headers=admin_headers).json()
    assert body["count"] == 2
    assert body["next"] == "http://testserver/user?page=2&limit=1&role=delivery"


def test_admin_creates_validated_user(client, admin_headers):
    response = client.post("/user", json=new_user_payload(), headers=admin_headers)
    assert response.status_code == 201
    body = response.json()
    assert body["role"] == "branch_admin"
    assert body["isValidated"] is True


def test_admin_create_user_rejects_duplicate_email(client, admin_headers, customer):
    response = client.post("/user", json=new_user_payload(email=customer.email),
                           headers=admin_headers)
    assert response.status_code == 400


def test_admin_updates_user_role_and_branch(client, admin_headers, customer, location_tree):
    branch = client.post("/branch", json={
        "name": "Sucursal Norte", "address": "Calle 1", "latitude": 10.5,
        "longitude": -66.9, "cityId": location_tree["city"]["id"],
    }, headers=admin_headers).json()

    response = client.patch(f"/user/{customer.id}",
                            json={"role": "branch_admin", "branchId": branch["id"]},
                            headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["role"] == "branch_admin"
    assert response.json()["branchId"] == branch["id"]


def test_owner_can_delete_own_account(client, customer, admin_headers):
    assert client.delete(f"/user/{customer.id}", headers=bearer(customer)).status_code == 204
    assert client.get(f"/user/{customer.id}", headers=admin_headers).status_code == 404


def test_deleted_users_are_not_counted(client, admin_headers, customer):
    client.delete(f"/user/{customer.id}", headers=admin_headers)
    body = client.get("/user", headers=admin_headers).json()
    assert body["count"] == 1
