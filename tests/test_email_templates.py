import uuid

from shared.helpers.email_helper import EmailHelper

from conftest import bearer


def test_template_crud(client, admin_headers):
    response = client.post("/email", json={"name": "welcome",
                                           "html": "<h1>Welcome {name}</h1>"},
                           headers=admin_headers)
    assert response.status_code == 201
    template = response.json()
    # plain text falls back to the html without tags
    assert template["text"] == "Welcome {name}"

    assert client.get("/email/welcome", headers=admin_headers).json()["id"] == template["id"]
    assert len(client.get("/email", headers=admin_headers).json()) == 1

    updated = client.put(f"/email/{template['id']}", json={"html": "<p>Hola {name}</p>"},
                         headers=admin_headers)
    assert updated.status_code == 200
    assert updated.json()["html"] == "<p>Hola {name}</p>"

    assert client.delete(f"/email/{template['id']}", headers=admin_headers).status_code == 204
    assert client.get("/email/welcome", headers=admin_headers).status_code == 404


def test_duplicate_template_name_is_rejected(client, admin_headers, otp_template):
    response = client.post("/email", json={"name": "otp_verification", "html": "<p>x</p>"},
                           headers=admin_headers)
    assert response.status_code == 400


def test_templates_are_admin_only(client, branch_admin):
    assert client.get("/email", headers=bearer(branch_admin)).status_code == 403


def test_unknown_template_id_is_not_found(client, admin_headers):
    response = client.delete(f"/email/{uuid.uuid4()}", headers=admin_headers)
    assert response.status_code == 404


def test_render_template_fills_placeholders(db, otp_template):
    helper = EmailHelper()
    html, text = helper.render_template(db, "otp_verification", {"otp": "123456", "name": "Ana"})
    assert "<b>123456</b>" in html
    assert text == "Hi Ana, your code is 123456"


def test_render_template_with_missing_variable_returns_none(db, otp_template):
    assert EmailHelper().render_template(db, "otp_verification", {"otp": "1"}) is None


def test_send_email_without_smtp_host_is_skipped():
    assert EmailHelper().send_email([("a@example.com", "A")], "Hi", "<p>Hi</p>") is False
