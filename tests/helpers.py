def signup(client, name="John", email="j@test.com", password="pass1"):
    return client.post("/signup", json={"name": name, "email": email, "password": password})


def login(client, email="j@test.com", password="pass1"):
    return client.post("/login", json={"email": email, "password": password})
