# seed_contacts.py
import os
import sys
from pymongo import MongoClient
from dotenv import load_dotenv

# Add the project root directory to Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from contacts_app.models.contact import Contact

SAMPLE_CONTACTS = [
    {"first": "Shruti", "last": "Kapoor", "twitter": "@shrutikapoor08",
     "avatar": "https://sessionize.com/image/124e-400o400o2-wHVdAuNaxi8KJrgtN3ZKci.jpg"},
    {"first": "Glenn", "last": "Reyes", "twitter": "@glnnrys",
     "avatar": "https://sessionize.com/image/1940-400o400o2-Enh9dnYmrLYhJSTTPSw3MH.jpg"},
    {"first": "Ryan", "last": "Florence", "favorite": True,
     "avatar": "https://sessionize.com/image/9273-400o400o2-3tyrUE3HjsCHJLU5aUJCja.jpg"},
    {"first": "Oscar", "last": "Newman", "twitter": "@__oscarnewman",
     "avatar": "https://sessionize.com/image/d14d-400o400o2-pyB229HyFPCnUcZhHf3kWS.png"},
    {"first": "Michael", "last": "Jackson",
     "avatar": "https://sessionize.com/image/fd45-400o400o2-fw91uCdGU9hFP334dnyVCr.jpg",
     "notes": ["Met at the conference after-party.", "Prefers email over phone."]},
    {"first": "Christopher", "last": "Chedeau", "twitter": "@Vjeux",
     "avatar": "https://sessionize.com/image/b07e-400o400o2-KgNRF3S9sD5ZR4UsG7hG4g.jpg"},
]

def run_seed():
    """
    Inserts the sample contacts into the database named by MONGO_URI.
    Pass --reset to empty the contacts collection first.
    """
    print("Starting contacts seed...")

    load_dotenv()
    mongo_uri = os.getenv('MONGO_URI', 'mongodb://localhost:27017/contacts')

    try:
        client = MongoClient(mongo_uri)
        # Assumes the database name is the last part of the URI path
        db_name = mongo_uri.split('/')[-1].split('?')[0] or 'contacts'
        db = client[db_name]
        print(f"Successfully connected to database: '{db_name}'")
    except Exception as e:
        print(f"ERROR: Could not connect to MongoDB. {e}")
        return

    contacts_collection = db['contacts']
    if '--reset' in sys.argv:
        deleted = contacts_collection.delete_many({}).deleted_count
        print(f"Removed {deleted} existing contacts.")

    documents = [
        Contact.from_dict(data).to_dict()
        for data in SAMPLE_CONTACTS
    ]
    result = contacts_collection.insert_many(documents)
    print(f"Inserted {len(result.inserted_ids)} contacts.")

if __name__ == "__main__":
    run_seed()
