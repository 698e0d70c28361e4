from .resource_seeder import ResourceSeeder as ResourceSeeder
from .service_registrations import build_registrations as build_registrations
