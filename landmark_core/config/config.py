from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API configuration
    api_version: str = "1.0"
    log_level: str = "INFO"

    # Google Routes API configuration
    google_maps_api_key: str = ""
    routes_url: str = "https://routes.googleapis.com/directions/v2:computeRoutes"
    travel_mode: str = "WALK"
    route_timeout_s: float = 10.0

    # API call limits
    max_api_calls_per_day: int = 1000

    # MongoDB configuration for landmark and feedback reads
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "landmarks"
    mongo_feedback_collection: str = "feedbacks"
    mongo_landmark_collection: str = "markers"

    # Shown when a landmark document carries no image
    placeholder_image_url: str = "https://via.placeholder.com/150"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
