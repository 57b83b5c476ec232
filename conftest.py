# Lets pytest find the `kombi` package from a plain checkout.
