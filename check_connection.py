# Connectivity check: check_connection.py

import asyncio
from motor.motor_asyncio import AsyncIOMotorClient
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

COLLECTIONS = ["channels", "users", "videos", "ad_campaigns", "advertisers_data", "payment_requests", "analytics"]

async def check_connection():
    mongodb_url = os.getenv('MONGODB_URL', 'mongodb://localhost:27017')
    database_name = os.getenv('DATABASE_NAME', 'gloverse-d94dc')

    print(f"Connecting to: {mongodb_url}")
    print(f"Database: '{database_name}'")

    client = AsyncIOMotorClient(mongodb_url)
    try:
        await client.server_info()
        print("\nConnection successful!")

        db = client[database_name]
        print("\n=== Collection sizes ===")
        for name in COLLECTIONS:
            count = await db[name].count_documents({})
            print(f"{name:<20} {count}")
    except Exception as e:
        print(f"\nConnection failed: {e}")
        print(f"Error type: {type(e)}")
    finally:
        client.close()

if __name__ == "__main__":
    asyncio.run(check_connection())
