from sqlmodel import Session, select
from .session import get_engine
from .models import Review, InventoryItem, WishlistItem

def upsert(session: Session, model, where: dict, values: dict):
    row = session.exec(select(model).filter_by(**where)).first()
    if row:
        for k, v in values.items():
            setattr(row, k, v)
        session.add(row)
        return row
    row = model(**where, **values)
    session.add(row)
    return row

def seed_defaults():
    with Session(get_engine()) as session:
        # Reviews
        upsert(session, Review,
               {"coffee_name": "Bourbon Amarelo"},
               {"brand": "Orfeu", "origin": "Cerrado Mineiro", "brew_method": "Coado (V60/Melitta)",
                "roast_level": "Média", "rating": 4.5, "acidity": 3.5, "body": 3,
                "sweetness": 4, "bitterness": 2, "aroma": 4.5,
                "notes": "Chocolate ao leite, caramelo"})
        upsert(session, Review,
               {"coffee_name": "Catuaí Vermelho"},
               {"brand": "Coffee Lab", "origin": "Sul de Minas", "brew_method": "Espresso",
                "roast_level": "Escura", "rating": 4, "acidity": 2, "body": 4.5,
                "sweetness": 3, "bitterness": 3.5, "aroma": 4})

        # Pantry
        upsert(session, InventoryItem,
               {"name": "Bourbon Amarelo"},
               {"brand": "Orfeu", "origin": "Cerrado Mineiro", "roast_level": "Média", "weight_g": 250})

        # Wishlist
        upsert(session, WishlistItem,
               {"name": "Geisha Natural"},
               {"origin": "Panamá", "where_to_buy": "Torrefação local"})

        session.commit()
        return "seeded"
