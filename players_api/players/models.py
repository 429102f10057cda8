from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    Enum,
    Integer,
    String,
)

from players_api.players.player_dataclasses import Player, Profession, Race
from players_api.store.database import db


class PlayerModel(db):
    __tablename__ = "players"

    # SQLite only autoincrements INTEGER primary keys
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    name = Column(String(12), nullable=False)
    title = Column(String(30), nullable=False)
    race = Column(Enum(Race), nullable=False)
    profession = Column(Enum(Profession), nullable=False)
    birthday = Column(BigInteger, nullable=False)
    banned = Column(Boolean, nullable=False, default=False)
    experience = Column(Integer, nullable=False)
    level = Column(Integer, nullable=False)
    until_next_level = Column(Integer, nullable=False)

    def to_dc(self) -> Player:
        return Player(
            id=self.id,
            name=self.name,
            title=self.title,
            race=self.race,
            profession=self.profession,
            birthday=self.birthday,
            banned=self.banned,
            experience=self.experience,
            level=self.level,
            until_next_level=self.until_next_level,
        )
