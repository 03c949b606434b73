"""AgriLink marketplace API package."""
