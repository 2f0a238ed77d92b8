"""
Daily Word Game Server - Main Entry Point

This is the main entry point for the game server.
It initializes the storage backend, the solution provider and the game
service, then starts the Flask application.
"""

from dailyword import create_app
from dailyword.config import Config, validate_game_settings
from dailyword.services.game_service import initialize_game_service
from dailyword.services.solution_provider import HttpSolutionFetcher, SolutionProvider
from dailyword.storage import BestEffortStorage, create_storage
from dailyword.utils.game_logger import game_logger


def build_game_service(config_class=Config):
    """Wire storage, solution provider and the game service from configuration."""
    validate_game_settings()
    
    storage = BestEffortStorage(create_storage(config_class))
    fetcher = HttpSolutionFetcher(
        config_class.SOLUTION_URL_TEMPLATE,
        timeout=config_class.FETCH_TIMEOUT_SECONDS
    )
    provider = SolutionProvider(fetcher, storage)
    return initialize_game_service(storage, provider)


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")
        
        build_game_service(Config)
        print(f"✓ Game service initialized ({Config.STORAGE_BACKEND} storage)")
        
        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")
        
        game_logger.logger.info("Daily Word Server Starting")
        
        print(f"\nStarting Daily Word Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)
        
        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)
        
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Daily Word Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
