"""General-purpose helpers: checksums, encryption, signing, conversion, concurrency and more."""