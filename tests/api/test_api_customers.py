"""
Customer API tests
"""
import pytest
from fastapi.testclient import TestClient


class TestCreateCustomer:

    @pytest.mark.parametrize("token_name", ["manager_token", "receptionist_token"])
    def test_create(self, request, login_as, token_name):
        client = login_as(request.getfixturevalue(token_name))
        response = client.post("/api/customers", json={
            "firstName": "John",
            "lastName": "Smith",
            "email": "john@example.com",
            "phone": "555-0101"
        })

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Customer created successfully."
        assert isinstance(data["customerId"], int)

    def test_admin_forbidden(self, login_as, admin_token):
        response = login_as(admin_token).post("/api/customers", json={
            "firstName": "John", "lastName": "Smith", "email": "john@example.com"
        })

        assert response.status_code == 403
        assert response.json() == {"error": "Access denied. Allowed roles: Manager, Receptionist."}

    def test_requires_login(self, client: TestClient):
        response = client.post("/api/customers", json={
            "firstName": "John", "lastName": "Smith", "email": "john@example.com"
        })
        assert response.status_code == 401

    def test_duplicate_email(self, login_as, receptionist_token, sample_customer):
        response = login_as(receptionist_token).post("/api/customers", json={
            "firstName": "Janet", "lastName": "Doe", "email": "jane@example.com"
        })

        assert response.status_code == 400
        assert response.json() == {"error": "Email already exists."}

    def test_invalid_email(self, login_as, receptionist_token):
        response = login_as(receptionist_token).post("/api/customers", json={
            "firstName": "John", "lastName": "Smith", "email": "john.example.com"
        })

        assert response.status_code == 400
        assert response.json() == {"error": "email: Invalid email format."}

    def test_missing_name(self, login_as, receptionist_token):
        response = login_as(receptionist_token).post("/api/customers", json={
            "lastName": "Smith", "email": "john@example.com"
        })

        assert response.status_code == 400
        assert "firstName" in response.json()["error"]


class TestSearchCustomers:

    def test_list(self, login_as, admin_token, sample_customer):
        response = login_as(admin_token).get("/api/customers")

        assert response.status_code == 200
        assert response.json() == [{
            "CustomerID": sample_customer.id,
            "FirstName": "Jane",
            "LastName": "Doe",
            "Email": "jane@example.com",
            "Phone": "555-0100"
        }]

    def test_search(self, login_as, receptionist_token, sample_customer):
        client = login_as(receptionist_token)

        assert len(client.get("/api/customers", params={"q": "doe"}).json()) == 1
        assert client.get("/api/customers", params={"q": "smith"}).json() == []

    def test_requires_login(self, client: TestClient):
        assert client.get("/api/customers").status_code == 401
