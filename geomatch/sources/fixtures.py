"""
Default synthetic provider directory: registered Caschi Gialli around Rome,
in the registry's wire format.
"""

ROME_PROVIDERS = [
    {
        "id": "151",
        "fullName": "name",
        "phoneNumber": "023123",
        "email": "cg@gmail.com",
        "street": "Macinului Nr 1",
        "latitude": 41.887965758804484,
        "longitude": 12.487351610781843,
        "serviceRadius": 10,
        "services": ["Electrical", "Plumbing", "Gardening", "Cleaning", "Carpentry"],
        "description": "Professional multi-service provider with expertise in electrical, "
                       "plumbing, gardening, cleaning, and carpentry work.",
    },
    {
        "id": "cg-2",
        "fullName": "Anna Verdi",
        "phoneNumber": "+39 333 456 7890",
        "email": "anna.verdi@email.com",
        "street": "Piazza Navona 12, Roma",
        "latitude": 41.8986,
        "longitude": 12.4768,
        "serviceRadius": 20,
        "services": ["Cleaning", "Gardening"],
        "description": "Servizi di pulizia professionale e giardinaggio. "
                       "Disponibile per case private e uffici.",
    },
    {
        "id": "cg-3",
        "fullName": "Marco Neri",
        "phoneNumber": "+39 333 567 8901",
        "email": "marco.neri@email.com",
        "street": "Via del Tritone 89, Roma",
        "latitude": 41.9073,
        "longitude": 12.4632,
        "serviceRadius": 12,
        "services": ["Carpentry", "Painting"],
        "description": "Falegname e imbianchino esperto. "
                       "Realizzo mobili su misura e ristrutturazioni.",
    },
    {
        "id": "cg-4",
        "fullName": "Sofia Russo",
        "phoneNumber": "+39 333 678 9012",
        "email": "sofia.russo@email.com",
        "street": "Via Appia 156, Roma",
        "latitude": 41.8955,
        "longitude": 12.4823,
        "serviceRadius": 25,
        "services": ["IT Support", "Appliance Repair"],
        "description": "Tecnico informatico e riparazione elettrodomestici. "
                       "Assistenza a domicilio 24/7.",
    },
    {
        "id": "cg-5",
        "fullName": "Luca Ferrari",
        "phoneNumber": "+39 333 345 6789",
        "email": "luca.ferrari@email.com",
        "street": "Via Veneto 78, Roma",
        "latitude": 41.9109,
        "longitude": 12.4818,
        "serviceRadius": 15,
        "services": ["Plumbing", "Electrical"],
        "description": "Idraulico ed elettricista con 15+ anni di esperienza. "
                       "Specializzato in riparazioni domestiche e installazioni.",
    },
]
