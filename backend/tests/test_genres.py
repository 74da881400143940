from movie_catalog.services import GenreService
from tests.helpers import create_genre


def test_create_genre_returns_created_genre(client):
    response = client.post("/genres", json={"name": "Drama"})

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Drama"
    assert isinstance(body["id"], int)


def test_create_genre_rejects_name_differing_only_in_case(client):
    create_genre(client, "Drama")

    for name in ("drama", "DRAMA", "dRaMa"):
        response = client.post("/genres", json={"name": name})
        assert response.status_code == 409
        assert response.json() == {"message": "Gênero já cadastrado"}

    assert [genre["name"] for genre in client.get("/genres").json()] == ["Drama"]


def test_create_genre_requires_name(client):
    for body in ({}, {"name": ""}, {"name": None}):
        response = client.post("/genres", json=body)
        assert response.status_code == 400
        assert response.json() == {"message": "O nome do gênero é obrigatório"}


def test_create_genre_without_body_requires_name(client):
    response = client.post("/genres")

    assert response.status_code == 400
    assert response.json() == {"message": "O nome do gênero é obrigatório"}
    assert client.get("/genres").json() == []


def test_create_genre_failure_carries_cause(client, monkeypatch):
    async def broken_create(self, name):
        raise RuntimeError("disk full")

    monkeypatch.setattr(GenreService, "create_genre", broken_create)

    response = client.post("/genres", json={"name": "Drama"})

    assert response.status_code == 500
    assert response.json() == {"message": "Falha ao cadastrar o gênero", "error": "disk full"}


def test_update_genre(client):
    genre_id = create_genre(client, "Terror")

    response = client.put(f"/genres/{genre_id}", json={"name": "Horror"})

    assert response.status_code == 200
    assert response.json() == {"message": "Gênero atualizado"}
    assert client.get("/genres").json() == [{"id": genre_id, "name": "Horror"}]


def test_update_genre_to_its_own_name_succeeds(client):
    genre_id = create_genre(client, "Comedy")

    assert client.put(f"/genres/{genre_id}", json={"name": "Comedy"}).status_code == 200
    assert client.put(f"/genres/{genre_id}", json={"name": "COMEDY"}).status_code == 200
    assert client.get("/genres").json() == [{"id": genre_id, "name": "COMEDY"}]


def test_update_genre_to_name_of_another_genre_conflicts(client):
    create_genre(client, "Drama")
    other_id = create_genre(client, "Comedy")

    response = client.put(f"/genres/{other_id}", json={"name": "drama"})

    assert response.status_code == 409
    assert response.json() == {"message": "Gênero já cadastrado"}
    names = sorted(genre["name"] for genre in client.get("/genres").json())
    assert names == ["Comedy", "Drama"]


def test_update_unknown_genre_returns_not_found(client):
    create_genre(client, "Drama")

    response = client.put("/genres/999", json={"name": "Western"})

    assert response.status_code == 404
    assert response.json() == {"message": "Gênero não encontrado"}
    assert [genre["name"] for genre in client.get("/genres").json()] == ["Drama"]


def test_update_genre_checks_name_before_existence(client):
    response = client.put("/genres/999", json={})

    assert response.status_code == 400
    assert response.json() == {"message": "O nome do gênero é obrigatório"}


def test_update_genre_without_body_requires_name(client):
    genre_id = create_genre(client, "Drama")

    response = client.put(f"/genres/{genre_id}")

    assert response.status_code == 400
    assert response.json() == {"message": "O nome do gênero é obrigatório"}
    assert client.get("/genres").json() == [{"id": genre_id, "name": "Drama"}]


def test_list_genres_ordered_by_name(client):
    for name in ("Western", "Action", "Musical"):
        create_genre(client, name)

    names = [genre["name"] for genre in client.get("/genres").json()]

    assert names == ["Action", "Musical", "Western"]


def test_non_numeric_genre_id_fails_update(client):
    response = client.put("/genres/abc", json={"name": "Drama"})

    assert response.status_code == 500
    assert response.json() == {"message": "Falha ao atualizar o gênero"}
