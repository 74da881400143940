def create_genre(client, name):
    response = client.post("/genres", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()["id"]


def create_movie(client, payload):
    response = client.post("/movies", json=payload)
    assert response.status_code == 201, response.text
    return response


def movie_payload(title, genre_id, language_id, oscar_count=0, release_date="2000-01-01"):
    return {
        "title": title,
        "genre_id": genre_id,
        "language_id": language_id,
        "oscar_count": oscar_count,
        "release_date": release_date,
    }


def movie_id_by_title(client, title):
    movies = client.get("/movies").json()
    return next(movie["id"] for movie in movies if movie["title"] == title)
