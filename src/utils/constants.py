"""
Constantes globales pour Movies API.

Ce module contient les constantes partagées par les services et la couche web:
- Libellés des sources de notes
- Messages d'erreur et de succès exposés aux clients
- Bornes de validation des paramètres de requête
"""

# Libellés des sources de notes (champ "source" des ratings)
LOCAL_RATING_SOURCE = "Local"
ROTTEN_TOMATOES_SOURCE = "Rotten Tomatoes"

# Bornes exclusives du paramètre year
MIN_YEAR = 1800
MAX_YEAR = 2100

# Messages d'erreur (films)
MOVIE_NOT_FOUND = "Movie not found with the provided IMDB ID"

# Messages d'erreur (validation)
INVALID_PAGE_PARAMETER = "Page parameter must be a positive integer"
INVALID_YEAR_PARAMETER = f"Year parameter must be between {MIN_YEAR} and {MAX_YEAR}"
INVALID_SORT_ORDER = 'Sort order must be either "asc" or "desc"'
GENRE_REQUIRED = "Genre parameter is required"
IMDB_ID_REQUIRED = "IMDB ID is required"
INVALID_MOVIE_ID = "Movie ID must be an integer"

# Messages d'erreur (base de données)
DATABASE_QUERY_ERROR = "Database query execution failed"

# Messages d'erreur (API externes)
OMDB_API_ERROR = "Failed to fetch data from OMDB API"
RATINGS_API_ERROR = "Failed to fetch ratings from local ratings API"
RATINGS_API_UNUSABLE = "Local ratings API returned no usable ratings"
OMDB_API_UNUSABLE = "OMDB API returned no usable rating"

# Messages d'erreur (génériques)
INTERNAL_SERVER_ERROR = "An internal server error occurred"
BAD_REQUEST = "Invalid request parameters"

# Messages de succès
MOVIES_FETCHED = "Movies fetched successfully"
MOVIE_DETAILS_FETCHED = "Movie details fetched successfully"
MOVIES_BY_YEAR_FETCHED = "Movies by year fetched successfully"
MOVIES_BY_GENRE_FETCHED = "Movies by genre fetched successfully"
GENRES_FETCHED = "Genres fetched successfully"
