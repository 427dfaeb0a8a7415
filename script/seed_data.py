#!/usr/bin/env python3
"""
Database Seed Script
Populate the demo catalog into the database

Features:
1. Create tables (SQLite/local runs; PostgreSQL should run `alembic upgrade head` first)
2. Seed movies, hall, shows, seat categories and seats - skipped if movies already exist
"""

import asyncio

from sqlalchemy import func, select

from src.platform.config.di import container
import src.service.reservation.driven_adapter.model  # noqa: F401
from src.service.reservation.driven_adapter.model.booking_model import BookingModel
from src.service.reservation.driven_adapter.model.movie_model import MovieModel
from src.service.reservation.driven_adapter.model.seat_model import SeatModel
from src.service.reservation.driven_adapter.model.show_model import ShowModel
from src.service.reservation.driven_adapter.seed.catalog_seeder import seed_catalog


async def verify_data(database) -> None:
    """Verify seeded data"""
    print('🔍 Verifying seeded data...')

    async with database.session() as session:
        for label, model in [
            ('Movies', MovieModel),
            ('Shows', ShowModel),
            ('Seats', SeatModel),
            ('Bookings', BookingModel),
        ]:
            count = await session.scalar(select(func.count()).select_from(model))
            print(f'   {label} count: {count}')

        result = await session.execute(
            select(ShowModel.id, MovieModel.title)
            .join(MovieModel, MovieModel.id == ShowModel.movie_id)
            .order_by(ShowModel.id)
        )
        for show_id, title in result.all():
            print(f'      Show ID={show_id}, Movie={title}')

    print('   ✅ Data verification completed!')


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    database = container.database()
    clock = container.clock()
    try:
        await database.create_tables()
        async with database.transaction() as session:
            seeded = await seed_catalog(session, now=clock.now())
        print('✅ Catalog seeded!' if seeded else '⏭️  Catalog already present, nothing to do')
        await verify_data(database)

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        exit(1)

    finally:
        await database.dispose()


if __name__ == '__main__':
    asyncio.run(main())
