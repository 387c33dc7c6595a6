from fastapi import HTTPException

from fitcart.main import app


# Dummy routes
@app.get("/raise-418")
def raise_418():
    raise HTTPException(status_code=418, detail="I am a teapot")


@app.get("/raise-exception")
def raise_exception():
    raise ValueError("Kaboom")


def test_http_exception_renders_json(client):
    response = client.get("/raise-418")

    assert response.status_code == 418
    assert response.json() == {"status_code": 418, "detail": "I am a teapot"}


def test_unhandled_exception_renders_gremlins(client):
    response = client.get("/raise-exception")

    assert response.status_code == 500
    assert response.json()["detail"] == "Gremlins."
