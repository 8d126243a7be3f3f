"""
Allow running the package with: python -m imgdedupe

Examples:
    python -m imgdedupe /path/to/photos      # Scan and report
    python -m imgdedupe config               # Show configuration
    python -m imgdedupe config --init        # Create example config file
"""

import sys


def main():
    if len(sys.argv) > 1 and sys.argv[1] == 'config':
        sys.argv.pop(1)
        from .user_config import get_user_config

        config = get_user_config()

        if '--init' in sys.argv or '-i' in sys.argv:
            if config.create_example_config():
                print("✓ Created example configuration file at:")
                print(f"  {config.config_file_path}")
            else:
                print("✗ Failed to create configuration file.")
                sys.exit(1)
        else:
            print(f"Configuration file: {config.config_file_path}")
            if config.config_file_path.exists():
                print("Status: ✓ Found")
            else:
                print("Status: ✗ Not found (using defaults)")
                print("\nRun 'python -m imgdedupe config --init' to create one.")

            print("\nCurrent settings:")
            print(f"  default_workers: {config.default_workers}")
            print(f"  hash_algorithm: {config.hash_algorithm}")
            print(f"  hash_size: {config.hash_size}")
            print(f"  max_image_pixels: {config.max_image_pixels:,}")
    else:
        from .cli import main as cli_main
        sys.exit(cli_main())


if __name__ == '__main__':
    main()
