"""
User-facing response messages.

Clients match on these strings, so the wording is part of the API contract.
"""

# Movies
MOVIE_ALREADY_EXISTS = "Filme já cadastrado"
MOVIE_NOT_FOUND = "Filme não encontrado"
MOVIE_UPDATED = "Filme atualizado"
MOVIE_DELETED = "Filme deletado"
MOVIE_CREATE_FAILED = "falha ao cadastrar um filme"
MOVIE_UPDATE_FAILED = "falha ao atualizar o registro do filme"
MOVIE_DELETE_FAILED = "Não foi possível remover o filme"
MOVIE_FILTER_FAILED = "Falha ao filtrar filmes por gênero"

# Genres
GENRE_NAME_REQUIRED = "O nome do gênero é obrigatório"
GENRE_ALREADY_EXISTS = "Gênero já cadastrado"
GENRE_NOT_FOUND = "Gênero não encontrado"
GENRE_UPDATED = "Gênero atualizado"
GENRE_CREATE_FAILED = "Falha ao cadastrar o gênero"
GENRE_UPDATE_FAILED = "Falha ao atualizar o gênero"

# Generic
INTERNAL_ERROR = "Erro interno do servidor"
