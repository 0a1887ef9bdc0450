"""Box office: concert catalogue, ticket cart and checkout."""
