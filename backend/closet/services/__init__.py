"""Business logic for pieces, outfits, wear logging and analytics."""
